"""
Clause state and fragment accumulation for the clause builder.
"""

import logging

from sidecar.domain.value_objects import ClauseKind
from sidecar.infrastructure.security import InputSanitizer

logger = logging.getLogger(__name__)


class ClauseState:
    """Tracks the clause and field the next comparison applies to."""

    def __init__(self):
        self._clause: ClauseKind | None = None
        self._field: str | None = None

    @property
    def current_clause(self) -> ClauseKind | None:
        return self._clause

    @property
    def current_field(self) -> str | None:
        return self._field

    def select_clause(self, name: "str | ClauseKind") -> bool:
        """
        Make a clause current.

        Unknown clause names leave the current clause untouched.

        Returns:
            True if the clause was selected
        """
        clause = ClauseKind.from_name(name)
        if clause is None:
            logger.debug(f"Ignoring unknown clause {name!r}")
            return False

        self._clause = clause
        return True

    def select_field(self, name: str) -> str:
        """Key-sanitize a field name and make it current."""
        self._field = InputSanitizer.sanitize_key(name)
        return self._field

    def reset(self) -> None:
        self._clause = None
        self._field = None


class FragmentAccumulator:
    """Ordered fragments per clause, kept until explicitly cleared."""

    def __init__(self):
        self._fragments: dict[ClauseKind, list[str]] = {}

    def append(self, clause: ClauseKind, fragment: str) -> None:
        self._fragments.setdefault(clause, []).append(fragment)
        logger.debug(f"Appended {clause.keyword} fragment: {fragment}")

    def drain(self, clause: ClauseKind | None) -> list[str]:
        """Fragments accumulated for a clause; the stored sequence is left in place."""
        if clause is None:
            return []
        return list(self._fragments.get(clause, []))

    def clear(self, clause: ClauseKind | None = None) -> None:
        """Discard the fragments of one clause, or of every clause."""
        if clause is None:
            self._fragments.clear()
        else:
            self._fragments.pop(clause, None)
