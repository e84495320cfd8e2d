"""
Clause value objects.

Names the sections of a SQL statement the builder can accumulate fragment
text for.
"""

from enum import Enum


class ClauseKind(Enum):
    """Clause enumeration"""

    SELECT = "select"
    WHERE = "where"
    JOIN = "join"
    ORDERBY = "orderby"
    ORDER = "order"
    COUNT = "count"

    @property
    def keyword(self) -> str:
        """SQL keyword that prefixes the assembled clause."""
        if self is ClauseKind.ORDERBY:
            return "ORDER BY"
        return self.value.upper()

    @classmethod
    def from_name(cls, name: "str | ClauseKind") -> "ClauseKind | None":
        """
        Look up a clause by name, ignoring case.

        Args:
            name: Clause name such as "where" or "WHERE", or a ClauseKind

        Returns:
            Matching ClauseKind, or None when the name is not a known clause
        """
        if isinstance(name, ClauseKind):
            return name
        if not isinstance(name, str):
            return None
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None
