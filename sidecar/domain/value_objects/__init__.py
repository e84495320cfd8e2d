"""Immutable value objects for clause building."""

from .clause import ClauseKind
from .operator import BooleanJoiner, Operator, OperatorFamily
from .sanitizer import SanitizerKind, SanitizerToken, Transform

__all__ = [
    "BooleanJoiner",
    "ClauseKind",
    "Operator",
    "OperatorFamily",
    "SanitizerKind",
    "SanitizerToken",
    "Transform",
]
