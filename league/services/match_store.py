"""In-memory holder of a season's match list."""

import logging
import threading
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from league.schemas.match import Match

logger = logging.getLogger(__name__)


class InvalidMatchRecord(ValueError):
    """Raised when a match record cannot be accepted into the store."""

    def __init__(self, index: int, reason: str):
        self.index = index
        self.reason = reason
        super().__init__(f"Invalid match record at index {index}: {reason}")


def parse_match(record: Match | Mapping[str, Any], index: int = 0) -> Match:
    """Return ``record`` as a Match, parsing mappings in the wire shape."""
    if isinstance(record, Match):
        return record
    if not isinstance(record, Mapping):
        raise InvalidMatchRecord(index, f"expected a mapping, got {type(record).__name__}")
    try:
        return Match.model_validate(record)
    except ValidationError as exc:
        reason = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'record'}: {err['msg']}"
            for err in exc.errors()
        )
        raise InvalidMatchRecord(index, reason) from exc


class MatchStore:
    """
    Holds the authoritative match list for one season.

    ``set_matches`` replaces the whole list at once; readers always get an
    immutable snapshot, so a concurrent reader sees either the old or the new
    list and never a mix of both.
    """

    def __init__(self, matches: Iterable[Match | Mapping[str, Any]] = ()):
        self._lock = threading.Lock()
        self._matches: tuple[Match, ...] = ()
        if matches:
            self.set_matches(matches)

    def set_matches(self, matches: Iterable[Match | Mapping[str, Any]]) -> None:
        """Replace the held list. Records are validated before anything is swapped."""
        parsed = tuple(parse_match(record, index) for index, record in enumerate(matches))
        with self._lock:
            self._matches = parsed
        logger.debug("Match store replaced with %d matches", len(parsed))

    def get_matches(self) -> tuple[Match, ...]:
        """Return the held matches in the order they were set."""
        with self._lock:
            return self._matches

    def __len__(self) -> int:
        return len(self.get_matches())
