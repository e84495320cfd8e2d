"""
Database Infrastructure Module

This module builds sanitized SQL clause fragments. It never opens a
connection; the assembled text is handed to whatever database layer the
caller uses.
"""

from .clause_state import ClauseState, FragmentAccumulator
from .operators import (
    OperatorWhitelist,
    resolve_joiner_or_default,
    resolve_operator_or_default,
)
from .query_builder import ClauseBuilder
from .sanitizers import SanitizerRegistry, resolve_sanitizer_or_default

__all__ = [
    "ClauseBuilder",
    "ClauseState",
    "FragmentAccumulator",
    "OperatorWhitelist",
    "SanitizerRegistry",
    "resolve_joiner_or_default",
    "resolve_operator_or_default",
    "resolve_sanitizer_or_default",
]
