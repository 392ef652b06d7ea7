import httpx
import logging
from typing import Any

from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log,
)

from league.config import get_settings

logger = logging.getLogger(__name__)

# Exceptions to retry on
RETRYABLE_EXCEPTIONS = (
    httpx.ConnectTimeout,
    httpx.ReadTimeout,
    httpx.ConnectError,
    httpx.RemoteProtocolError,
)


class LeagueDataError(ValueError):
    """Raised when the league API answers with an unexpected payload."""


class LeagueClient:
    """Client for the league API serving the season's match list."""

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        settings = get_settings()
        self.base_url = (base_url or settings.league_api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.league_api_timeout_seconds
        self.access_token: str | None = None

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=30),
        retry=retry_if_exception_type(RETRYABLE_EXCEPTIONS),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
    async def _make_request(
        self,
        method: str,
        url: str,
        headers: dict | None = None,
        params: dict | None = None,
    ) -> httpx.Response:
        """
        Make an HTTP request with automatic retry on transient failures.

        Retries up to 3 times with exponential backoff on connection
        timeouts, read timeouts and connection errors.
        """
        async with httpx.AsyncClient(follow_redirects=True) as client:
            response = await client.request(
                method.upper(),
                url,
                headers=headers,
                params=params,
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response

    async def authenticate(self) -> None:
        """Fetch a fresh access token."""
        response = await self._make_request("get", f"{self.base_url}/getAccessToken")
        data = response.json()
        token = data.get("access_token") if isinstance(data, dict) else None
        if not token:
            raise LeagueDataError("Access token missing from league API response")
        self.access_token = token
        logger.info("League API authentication successful")

    async def ensure_authenticated(self) -> None:
        """Ensure we have an access token, reusing the cached one."""
        if not self.access_token:
            await self.authenticate()

    def get_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.access_token}"}

    async def get_all_matches(self) -> list[dict[str, Any]]:
        """Get the full match list of the season, in the order the API returns it."""
        await self.ensure_authenticated()
        url = f"{self.base_url}/getAllMatches"
        try:
            response = await self._make_request("get", url, headers=self.get_headers())
        except httpx.HTTPStatusError as exc:
            if exc.response.status_code != 401:
                raise
            logger.warning("League API rejected cached access token, re-authenticating")
            self.access_token = None
            await self.authenticate()
            response = await self._make_request("get", url, headers=self.get_headers())

        data = response.json()
        matches = data.get("matches") if isinstance(data, dict) else None
        if not isinstance(matches, list):
            raise LeagueDataError("Match list missing from league API response")
        return matches
