"""
Comparison operator whitelist.

Only the fourteen comparison forms of ``Operator`` are accepted by default.
Integrations can widen or narrow the set by injecting a validator that
receives ``(allowed, operator, builder)`` and returns the final verdict.
"""

import logging
from collections.abc import Callable
from typing import Any

from sidecar.domain.value_objects import BooleanJoiner, Operator, OperatorFamily

logger = logging.getLogger(__name__)

CompareValidator = Callable[[bool, str, Any], bool]

DEFAULT_OPERATOR = Operator.EQ
DEFAULT_JOINER = BooleanJoiner.OR


class OperatorWhitelist:
    """Closed set of comparison operators with an optional override."""

    ALLOWED_COMPARES = frozenset(op.value for op in Operator)

    def __init__(self, validator: CompareValidator | None = None):
        self._validator = validator

    def is_allowed(self, operator: str, builder: Any = None) -> bool:
        """
        Check whether a comparison operator may be used.

        Args:
            operator: Operator text, compared case-sensitively
            builder: Builder passed through to the override validator

        Returns:
            True if the operator is allowed
        """
        if isinstance(operator, Operator):
            operator = operator.value

        allowed = isinstance(operator, str) and operator in self.ALLOWED_COMPARES

        if self._validator is not None:
            allowed = bool(self._validator(allowed, operator, builder))

        return allowed


def resolve_operator_or_default(
    operator: "Operator | str", whitelist: OperatorWhitelist, builder: Any = None
) -> "Operator | str":
    """
    Resolve a caller-supplied operator, falling back to ``=``.

    Returns the matching Operator, or the raw text when an override validator
    allowed a token outside the built-in set.
    """
    text = operator.value if isinstance(operator, Operator) else operator

    if not whitelist.is_allowed(text, builder):
        logger.warning(f"Comparison operator {text!r} is not allowed, using {DEFAULT_OPERATOR.value!r}")
        return DEFAULT_OPERATOR

    try:
        return Operator(text)
    except ValueError:
        logger.debug(f"Operator {text!r} allowed by override, treating as scalar comparison")
        return text


def operator_family(operator: "Operator | str") -> OperatorFamily:
    """Fragment shape of an operator; override-allowed extras compare as scalars."""
    if isinstance(operator, Operator):
        return operator.family
    return OperatorFamily.SCALAR


def resolve_joiner_or_default(joiner: "BooleanJoiner | str | None") -> BooleanJoiner:
    """Resolve the boolean joiner, falling back to ``OR``."""
    if isinstance(joiner, BooleanJoiner):
        return joiner
    if isinstance(joiner, str):
        try:
            return BooleanJoiner(joiner.strip().upper())
        except ValueError:
            pass

    if joiner is not None:
        logger.warning(f"Boolean joiner {joiner!r} is not supported, using {DEFAULT_JOINER.value}")
    return DEFAULT_JOINER
