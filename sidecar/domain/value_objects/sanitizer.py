"""Sanitizer shorthand value objects."""

from collections.abc import Callable
from enum import Enum
from typing import Any, Union

Transform = Callable[[Any], Any]


class SanitizerKind(Enum):
    """Preset sanitizer enumeration"""

    INT = "int"
    FLOAT = "float"
    STRING = "string"
    KEY = "key"
    SQL = "sql"

    @classmethod
    def from_token(cls, token: Any) -> "SanitizerKind":
        """
        Map a shorthand token to its preset.

        Unknown tokens map to SQL, the generic escaping preset.
        """
        if isinstance(token, SanitizerKind):
            return token
        if isinstance(token, str):
            return _ALIASES.get(token, cls.SQL)
        return cls.SQL


_ALIASES = {
    "int": SanitizerKind.INT,
    "integer": SanitizerKind.INT,
    "float": SanitizerKind.FLOAT,
    "double": SanitizerKind.FLOAT,
    "string": SanitizerKind.STRING,
    "key": SanitizerKind.KEY,
}

# A preset, a shorthand string, or a caller-supplied transform.
SanitizerToken = Union[SanitizerKind, str, Transform]
