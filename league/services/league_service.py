"""Season facade: loads matches from the league API and serves schedule and standings."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from league.schemas.match import Match, TeamStanding
from league.services.league_client import LeagueClient
from league.services.match_store import MatchStore
from league.services.standings import compute_standings

logger = logging.getLogger(__name__)


class LeagueService:
    def __init__(self, client: LeagueClient | None = None, store: MatchStore | None = None):
        self.client = client or LeagueClient()
        self.store = store or MatchStore()
        self.loaded = False

    def set_matches(self, matches: Iterable[Match | Mapping[str, Any]]) -> None:
        self.store.set_matches(matches)
        self.loaded = True

    def get_matches(self) -> tuple[Match, ...]:
        return self.store.get_matches()

    def get_leaderboard(self) -> list[TeamStanding]:
        """Ranked standings over the current match snapshot."""
        return compute_standings(self.store.get_matches())

    async def fetch_data(self) -> None:
        """Load the season's matches from the league API, replacing the held list."""
        matches = await self.client.get_all_matches()
        self.set_matches(matches)
        logger.info("Loaded %d matches from league API", len(matches))

    async def ensure_loaded(self, refresh: bool = False) -> None:
        if refresh or not self.loaded:
            await self.fetch_data()
