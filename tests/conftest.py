import pytest
from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator
from unittest.mock import AsyncMock, Mock

from httpx import AsyncClient, ASGITransport

from league.main import app
from league.api.deps import get_league_service
from league.schemas.match import Match
from league.services.league_service import LeagueService
from league.services.match_store import MatchStore


KICKOFF = datetime(2024, 6, 14, 19, 0, tzinfo=timezone.utc)


def make_match(
    home: str,
    away: str,
    home_score: int | None = None,
    away_score: int | None = None,
    played: bool = True,
    day: int = 0,
    stadium: str = "Allianz Arena",
) -> Match:
    """Build a match; scores left out make it an unplayed fixture."""
    if home_score is None or away_score is None:
        played = False
    return Match(
        match_date=KICKOFF + timedelta(days=day),
        stadium=stadium,
        home_team=home,
        away_team=away,
        match_played=played,
        home_team_score=home_score,
        away_team_score=away_score,
    )


def wire_match(home: str, away: str, home_score: int, away_score: int, played: bool = True, day: int = 0) -> dict:
    """A match record as the league API sends it."""
    return {
        "matchDate": int((KICKOFF + timedelta(days=day)).timestamp() * 1000),
        "stadium": "Westfalenstadion",
        "homeTeam": home,
        "awayTeam": away,
        "matchPlayed": played,
        "homeTeamScore": home_score,
        "awayTeamScore": away_score,
    }


@pytest.fixture
def league_client() -> Mock:
    client = Mock()
    client.get_all_matches = AsyncMock(return_value=[])
    return client


@pytest.fixture
def league_service(league_client) -> LeagueService:
    return LeagueService(client=league_client, store=MatchStore())


@pytest.fixture(scope="function")
async def client(league_service) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with overridden league service dependency."""
    app.dependency_overrides[get_league_service] = lambda: league_service

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
