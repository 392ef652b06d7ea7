from unittest.mock import AsyncMock

import httpx
import pytest

from conftest import wire_match
from league.services.match_store import InvalidMatchRecord


@pytest.mark.asyncio
class TestLeagueService:
    async def test_fetch_data_replaces_matches(self, league_service, league_client):
        league_client.get_all_matches = AsyncMock(return_value=[
            wire_match("Netherlands", "Poland", 2, 1),
            wire_match("Austria", "France", 0, 1),
        ])

        await league_service.fetch_data()

        matches = league_service.get_matches()
        assert [m.home_team for m in matches] == ["Netherlands", "Austria"]
        assert league_service.loaded is True

    async def test_ensure_loaded_fetches_once_unless_refreshed(self, league_service, league_client):
        await league_service.ensure_loaded()
        await league_service.ensure_loaded()
        assert league_client.get_all_matches.await_count == 1

        await league_service.ensure_loaded(refresh=True)
        assert league_client.get_all_matches.await_count == 2

    async def test_get_leaderboard(self, league_service):
        league_service.set_matches([
            wire_match("Netherlands", "Poland", 2, 1),
            wire_match("Poland", "Austria", 1, 3),
            wire_match("Netherlands", "Austria", 2, 3, played=False),
        ])

        leaderboard = league_service.get_leaderboard()

        assert [s.team_name for s in leaderboard] == ["Austria", "Netherlands", "Poland"]
        assert [s.points for s in leaderboard] == [3, 3, 0]

    async def test_fetch_errors_propagate(self, league_service, league_client):
        league_client.get_all_matches = AsyncMock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(httpx.ConnectError):
            await league_service.fetch_data()
        assert league_service.loaded is False

    async def test_invalid_payload_is_rejected(self, league_service, league_client):
        league_client.get_all_matches = AsyncMock(return_value=[wire_match("Spain", "Spain", 1, 0)])

        with pytest.raises(InvalidMatchRecord):
            await league_service.fetch_data()
        assert league_service.get_matches() == ()
