"""Standings calculation: team discovery, stats accumulation and ranking."""

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from functools import cmp_to_key, partial, reduce
from types import MappingProxyType

from pyuca import Collator

from league.schemas.match import Match, TeamStanding

logger = logging.getLogger(__name__)

WIN_POINTS = 3
DRAW_POINTS = 1
LOSS_POINTS = 0

# (team, opponent) -> points earned by team in direct meetings with opponent
HeadToHead = Callable[[str, str], int]

# Unicode Collation Algorithm with the default table, as localeCompare uses
_collator = Collator()


def match_points(goals_for: int, goals_against: int) -> int:
    """Points a side earns for a single match result."""
    if goals_for > goals_against:
        return WIN_POINTS
    if goals_for == goals_against:
        return DRAW_POINTS
    return LOSS_POINTS


def _sides(match: Match) -> tuple[tuple[str, str, int, int], tuple[str, str, int, int]]:
    """Both perspectives of a played match as (team, opponent, scored, conceded)."""
    home_score = match.home_team_score
    away_score = match.away_team_score
    return (
        (match.home_team, match.away_team, home_score, away_score),
        (match.away_team, match.home_team, away_score, home_score),
    )


def discover_teams(matches: Iterable[Match]) -> list[str]:
    """Distinct team names across all matches, in first-seen order."""
    teams: dict[str, None] = {}
    for match in matches:
        teams.setdefault(match.home_team, None)
        teams.setdefault(match.away_team, None)
    return list(teams)


def _apply_result(standing: TeamStanding, scored: int, conceded: int) -> TeamStanding:
    return standing.model_copy(update={
        "matches_played": standing.matches_played + 1,
        "goals_for": standing.goals_for + scored,
        "goals_against": standing.goals_against + conceded,
        "points": standing.points + match_points(scored, conceded),
    })


def _fold_match(table: dict[str, TeamStanding], match: Match) -> dict[str, TeamStanding]:
    if not match.match_played:
        return table
    updated = dict(table)
    for team, _, scored, conceded in _sides(match):
        updated[team] = _apply_result(updated[team], scored, conceded)
    return updated


def accumulate_standings(matches: Sequence[Match]) -> Mapping[str, TeamStanding]:
    """
    Build a read-only mapping of team name to its accumulated standing.

    Every discovered team gets an entry, including teams whose matches have
    not been played yet. Only played matches contribute to the stats.
    """
    initial = {team: TeamStanding(team_name=team) for team in discover_teams(matches)}
    return MappingProxyType(reduce(_fold_match, matches, initial))


def head_to_head_points(matches: Iterable[Match], team: str, opponent: str) -> int:
    """Points ``team`` earned in played matches directly against ``opponent``."""
    points = 0
    for match in matches:
        if not match.match_played or not match.involves(team):
            continue
        for side, other, scored, conceded in _sides(match):
            if side == team and other == opponent:
                points += match_points(scored, conceded)
    return points


def build_head_to_head_table(matches: Iterable[Match]) -> dict[tuple[str, str], int]:
    """Precompute head-to-head points for every pair of teams that met."""
    table: dict[tuple[str, str], int] = {}
    for match in matches:
        if not match.match_played:
            continue
        for team, opponent, scored, conceded in _sides(match):
            key = (team, opponent)
            table[key] = table.get(key, 0) + match_points(scored, conceded)
    return table


def compare_names(a: str, b: str) -> int:
    """Collation order of two names, falling back to code points so the order stays total."""
    key_a = _collator.sort_key(a)
    key_b = _collator.sort_key(b)
    if key_a != key_b:
        return -1 if key_a < key_b else 1
    return (a > b) - (a < b)


def _table_lookup(table: Mapping[tuple[str, str], int], team: str, opponent: str) -> int:
    return table.get((team, opponent), 0)


def compare_standings(a: TeamStanding, b: TeamStanding, head_to_head: HeadToHead) -> int:
    """
    Negative when ``a`` ranks above ``b``.

    Cascade: points, head-to-head points, goal difference, goals scored,
    team name.
    """
    diff = b.points - a.points
    if diff:
        return diff

    diff = head_to_head(b.team_name, a.team_name) - head_to_head(a.team_name, b.team_name)
    if diff:
        return diff

    diff = b.goal_difference - a.goal_difference
    if diff:
        return diff

    diff = b.goals_for - a.goals_for
    if diff:
        return diff

    return compare_names(a.team_name, b.team_name)


def rank_standings(standings: Iterable[TeamStanding], head_to_head: HeadToHead) -> list[TeamStanding]:
    return sorted(standings, key=cmp_to_key(partial(compare_standings, head_to_head=head_to_head)))


def compute_standings(matches: Sequence[Match], *, precompute: bool = True) -> list[TeamStanding]:
    """
    Ranked league table for the given matches.

    With ``precompute`` the head-to-head points of all pairs are tabulated
    once; otherwise they are recomputed from the match list on every
    comparison. Both give the same ranking.
    """
    matches = tuple(matches)
    standings = accumulate_standings(matches)

    if precompute:
        head_to_head: HeadToHead = partial(_table_lookup, build_head_to_head_table(matches))
    else:
        head_to_head = partial(head_to_head_points, matches)

    ranking = rank_standings(standings.values(), head_to_head)
    logger.debug("Computed standings for %d teams from %d matches", len(ranking), len(matches))
    return ranking
