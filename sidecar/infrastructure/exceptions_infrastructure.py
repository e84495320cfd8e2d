"""
Infrastructure-specific exception hierarchy for Sidecar.

This module provides exceptions for caller contract violations detected while
building clause fragments. Recoverable input problems (unknown clause names,
operators, joiners or sanitizer tokens) never raise; they fall back to a safe
default instead.
"""

from typing import Any


class InfrastructureException(Exception):
    """Base exception for all infrastructure-level errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or {}


# ============================================================================
# Query Building Exceptions
# ============================================================================


class QueryBuilderError(InfrastructureException):
    """Raised when a clause fragment cannot be built."""

    pass


class InvalidArgumentError(QueryBuilderError):
    """Raised when a comparison receives values it cannot turn into valid SQL."""

    def __init__(self, operator: str, reason: str, value_count: int | None = None) -> None:
        message = f"Invalid arguments for {operator}: {reason}"
        details = {"operator": operator, "reason": reason, "value_count": value_count}
        super().__init__(message, details)
        self.operator = operator
        self.reason = reason
        self.value_count = value_count


class InvalidStateError(QueryBuilderError):
    """Raised when a comparison is attempted before the builder is ready for it."""

    def __init__(self, operator: str, clause: str | None = None, field: str | None = None) -> None:
        message = f"Cannot apply {operator}: no field selected"
        if clause:
            message += f" for {clause.upper()} clause"

        details = {"operator": operator, "clause": clause, "field": field}
        super().__init__(message, details)
        self.operator = operator
        self.clause = clause
        self.field = field
