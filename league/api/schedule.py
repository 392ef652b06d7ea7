"""Schedule endpoint: the season's matches for chronological display."""

from fastapi import APIRouter, Depends, Query

from league.api.deps import get_league_service, load_league_data
from league.schemas.league import ScheduleMatchResponse, ScheduleResponse
from league.services.league_service import LeagueService
from league.utils.flags import get_flag_url

router = APIRouter(tags=["schedule"])


@router.get("/schedule", response_model=ScheduleResponse)
async def get_schedule(
    order: str = Query(default="as_loaded", pattern="^(as_loaded|date)$", description="Match order"),
    refresh: bool = Query(default=False, description="Reload matches from the league API"),
    service: LeagueService = Depends(get_league_service),
):
    """
    Get the match schedule.

    Matches come in the order the league API delivered them, or sorted by
    kickoff time with ``order=date``.
    """
    await load_league_data(service, refresh)

    matches = list(service.get_matches())
    if order == "date":
        matches.sort(key=lambda m: m.match_date)

    return ScheduleResponse(
        total=len(matches),
        matches=[
            ScheduleMatchResponse(
                match_date=m.match_date,
                stadium=m.stadium,
                home_team=m.home_team,
                away_team=m.away_team,
                match_played=m.match_played,
                home_team_score=m.home_team_score,
                away_team_score=m.away_team_score,
                home_team_flag=get_flag_url(m.home_team),
                away_team_flag=get_flag_url(m.away_team),
            )
            for m in matches
        ],
    )
