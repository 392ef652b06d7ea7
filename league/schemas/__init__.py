from league.schemas.match import Match, TeamStanding
from league.schemas.league import (
    ScheduleMatchResponse,
    ScheduleResponse,
    LeaderboardEntryResponse,
    LeaderboardResponse,
)
