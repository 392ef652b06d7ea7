import logging
from functools import lru_cache

import httpx
from fastapi import HTTPException

from league.services.league_client import LeagueDataError
from league.services.league_service import LeagueService
from league.services.match_store import InvalidMatchRecord

logger = logging.getLogger(__name__)


@lru_cache
def get_league_service() -> LeagueService:
    return LeagueService()


async def load_league_data(service: LeagueService, refresh: bool) -> None:
    """Make sure matches are loaded, mapping loader failures to a 502."""
    try:
        await service.ensure_loaded(refresh=refresh)
    except (httpx.HTTPError, LeagueDataError, InvalidMatchRecord):
        logger.exception("Error fetching matches")
        raise HTTPException(status_code=502, detail="Failed to load matches")
