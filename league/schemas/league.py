"""Response schemas for the schedule and leaderboard endpoints."""

from datetime import datetime

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class ScheduleMatchResponse(BaseModel):
    model_config = {"populate_by_name": True, "alias_generator": to_camel}

    match_date: datetime
    stadium: str
    home_team: str
    away_team: str
    match_played: bool
    home_team_score: int | None = None
    away_team_score: int | None = None
    home_team_flag: str | None = None
    away_team_flag: str | None = None


class ScheduleResponse(BaseModel):
    total: int
    matches: list[ScheduleMatchResponse] = []


class LeaderboardEntryResponse(BaseModel):
    model_config = {"populate_by_name": True, "alias_generator": to_camel}

    position: int
    team_name: str
    matches_played: int
    goals_for: int
    goals_against: int
    goal_difference: int
    points: int
    flag_url: str | None = None


class LeaderboardResponse(BaseModel):
    total: int
    table: list[LeaderboardEntryResponse] = []
