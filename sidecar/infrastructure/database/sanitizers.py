"""
Sanitizer registry.

Maps shorthand tokens to the transform every comparison value is passed
through. Value transforms return SQL-ready text: numeric presets render bare
numbers, text presets render quoted and escaped string literals.
"""

import logging
from collections.abc import Callable
from typing import Any

from sidecar.domain.value_objects import SanitizerKind, SanitizerToken, Transform
from sidecar.infrastructure.security import InputSanitizer

logger = logging.getLogger(__name__)

SanitizerResolver = Callable[[Transform, Any, Any], Transform]


def quote_text(value: Any) -> str:
    """Free-text sanitizer rendered as a string literal."""
    return InputSanitizer.sanitize_sql_value(InputSanitizer.sanitize_text_field(value))


def quote_key(value: Any) -> str:
    """Key sanitizer rendered as a string literal."""
    return InputSanitizer.sanitize_sql_value(InputSanitizer.sanitize_key(value))


PRESETS: dict[SanitizerKind, Transform] = {
    SanitizerKind.INT: InputSanitizer.to_int,
    SanitizerKind.FLOAT: InputSanitizer.to_float,
    SanitizerKind.STRING: quote_text,
    SanitizerKind.KEY: quote_key,
    SanitizerKind.SQL: InputSanitizer.sanitize_sql_value,
}


class SanitizerRegistry:
    """
    Resolves sanitizer tokens to transforms.

    An optional resolver receives ``(transform, token, builder)`` after the
    built-in lookup and may substitute a different transform for any token.
    """

    def __init__(
        self,
        resolver: SanitizerResolver | None = None,
        presets: dict[SanitizerKind, Transform] | None = None,
    ):
        self._resolver = resolver
        self._presets = dict(PRESETS)
        if presets:
            self._presets.update(presets)

    def preset(self, kind: SanitizerKind) -> Transform:
        return self._presets[kind]

    def resolve(self, token: SanitizerToken, builder: Any = None) -> Transform:
        """
        Resolve a token or callable to a transform.

        Args:
            token: Preset, shorthand string, or a callable used as-is
            builder: Builder passed through to the override resolver

        Returns:
            A callable transform; never None
        """
        if callable(token):
            transform = token
        else:
            kind = SanitizerKind.from_token(token)
            if kind is SanitizerKind.SQL and token not in ("sql", SanitizerKind.SQL):
                logger.debug(f"Unrecognized sanitizer token {token!r}, escaping as SQL string")
            transform = self._presets[kind]

        if self._resolver is not None:
            override = self._resolver(transform, token, builder)
            if callable(override):
                transform = override
            else:
                logger.warning(
                    f"Sanitizer override for {token!r} returned a non-callable, keeping default"
                )

        return transform


def resolve_sanitizer_or_default(
    token: SanitizerToken, registry: SanitizerRegistry, builder: Any = None
) -> Transform:
    """Resolve a sanitizer, falling back to the SQL string escaper."""
    if token is None:
        return registry.preset(SanitizerKind.SQL)
    return registry.resolve(token, builder)
