"""
Core records of the league: a scheduled or played match, and a team's
accumulated standing.

Both are frozen. Wire names are camelCase (``homeTeam``, ``matchPlayed``...)
and can be used interchangeably with the snake_case attribute names when
constructing a record.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, StrictBool, StrictInt, field_validator, model_validator
from pydantic.alias_generators import to_camel


class Match(BaseModel):
    """One fixture between two teams, played or scheduled."""

    model_config = {"frozen": True, "populate_by_name": True, "alias_generator": to_camel}

    match_date: datetime
    stadium: str
    home_team: str
    away_team: str
    match_played: StrictBool
    # Only meaningful when match_played is true
    home_team_score: StrictInt | None = Field(default=None, ge=0)
    away_team_score: StrictInt | None = Field(default=None, ge=0)

    @field_validator("match_date")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # Kickoff times without an offset are UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @model_validator(mode="after")
    def _check_consistency(self) -> "Match":
        if self.home_team == self.away_team:
            raise ValueError(f"team {self.home_team!r} cannot play against itself")
        if self.match_played and (self.home_team_score is None or self.away_team_score is None):
            raise ValueError("played match must have both scores")
        return self

    def involves(self, team: str) -> bool:
        return team in (self.home_team, self.away_team)


class TeamStanding(BaseModel):
    """A team's accumulated statistics over the played matches of a season."""

    model_config = {"frozen": True, "populate_by_name": True, "alias_generator": to_camel}

    team_name: str
    matches_played: int = 0
    goals_for: int = 0
    goals_against: int = 0
    points: int = 0

    @property
    def goal_difference(self) -> int:
        return self.goals_for - self.goals_against
