from fastapi import APIRouter, Depends, Query

from league.api.deps import get_league_service, load_league_data
from league.schemas.league import LeaderboardEntryResponse, LeaderboardResponse
from league.services.league_service import LeagueService
from league.utils.flags import get_flag_url

router = APIRouter(tags=["leaderboard"])


@router.get("/leaderboard", response_model=LeaderboardResponse)
async def get_leaderboard(
    refresh: bool = Query(default=False, description="Reload matches from the league API"),
    service: LeagueService = Depends(get_league_service),
):
    """Get the league standings, best team first."""
    await load_league_data(service, refresh)

    standings = service.get_leaderboard()
    table = [
        LeaderboardEntryResponse(
            position=position,
            team_name=s.team_name,
            matches_played=s.matches_played,
            goals_for=s.goals_for,
            goals_against=s.goals_against,
            goal_difference=s.goal_difference,
            points=s.points,
            flag_url=get_flag_url(s.team_name),
        )
        for position, s in enumerate(standings, 1)
    ]
    return LeaderboardResponse(total=len(table), table=table)
