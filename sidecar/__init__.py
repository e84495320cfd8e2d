"""
Sidecar - sanitized SQL clause fragments.

Example usage:
    from sidecar import sidecar

    sql = sidecar().where("status").in_(["a", "b"], "string").assemble()
    # WHERE status IN ('a', 'b')
"""

from sidecar.domain.value_objects import BooleanJoiner, ClauseKind, Operator, SanitizerKind
from sidecar.infrastructure.config import BuilderConfig, configure_logging, get_builder_config
from sidecar.infrastructure.database import ClauseBuilder, OperatorWhitelist, SanitizerRegistry
from sidecar.infrastructure.exceptions_infrastructure import (
    InvalidArgumentError,
    InvalidStateError,
    QueryBuilderError,
)

__version__ = "1.0.0"


def version() -> str:
    """Library version string."""
    return __version__


def sidecar(**kwargs) -> ClauseBuilder:
    """Shorthand for a new ClauseBuilder; keyword arguments go to its constructor."""
    return ClauseBuilder(**kwargs)


__all__ = [
    "BooleanJoiner",
    "BuilderConfig",
    "ClauseBuilder",
    "ClauseKind",
    "InvalidArgumentError",
    "InvalidStateError",
    "Operator",
    "OperatorWhitelist",
    "QueryBuilderError",
    "SanitizerKind",
    "SanitizerRegistry",
    "configure_logging",
    "get_builder_config",
    "sidecar",
    "version",
]
