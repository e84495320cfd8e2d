"""
Sanitized SQL clause fragment builder.

This module builds comparison fragments for SQL clauses one field at a time.
Every value is passed through a sanitizer before it reaches the fragment text,
and every explicitly supplied operator is checked against a whitelist.

Key Security Features:
- Field names are reduced to safe key characters
- Values always pass through exactly one sanitizing transform
- Unknown sanitizer tokens fall back to SQL string escaping, never to raw text
- Unknown operators fall back to ``=``

Usage Examples:
    builder = ClauseBuilder()

    # WHERE status IN ('a', 'b') age > 18
    sql = (builder
        .where("status").in_(["a", "b"], "string")
        .select_field("age").gt(18)
        .assemble())

    # WHERE (id = 1 OR id = 2)
    sql = builder.where("id", [1, 2], compare="=").assemble()

    # WHERE score BETWEEN 10 AND 20
    sql = builder.where("score").between([10, 20]).assemble()
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from sidecar.domain.value_objects import (
    BooleanJoiner,
    ClauseKind,
    Operator,
    OperatorFamily,
    SanitizerToken,
    Transform,
)
from sidecar.infrastructure.config import BuilderConfig, get_builder_config
from sidecar.infrastructure.database.clause_state import ClauseState, FragmentAccumulator
from sidecar.infrastructure.database.operators import (
    CompareValidator,
    OperatorWhitelist,
    operator_family,
    resolve_joiner_or_default,
    resolve_operator_or_default,
)
from sidecar.infrastructure.database.sanitizers import (
    SanitizerRegistry,
    SanitizerResolver,
    resolve_sanitizer_or_default,
)
from sidecar.infrastructure.exceptions_infrastructure import (
    InvalidArgumentError,
    InvalidStateError,
)

logger = logging.getLogger(__name__)

_UNSET = object()

# Iterables that are a single value, not a sequence of values
_SCALAR_ITERABLES = (str, bytes, bytearray, Mapping)

_UNORDERED_TYPES = (set, frozenset)


def is_value_sequence(values: Any) -> bool:
    """True when values should be compared one by one rather than as a single value."""
    return isinstance(values, Iterable) and not isinstance(values, _SCALAR_ITERABLES)


class ClauseBuilder:
    """
    Fluent builder for sanitized comparison fragments.

    A builder holds the clause and field currently being described plus the
    fragments accumulated per clause. Use one builder per query; builders are
    not safe to share between concurrent callers.
    """

    def __init__(
        self,
        config: BuilderConfig | None = None,
        compare_validator: CompareValidator | None = None,
        sanitizer_resolver: SanitizerResolver | None = None,
        whitelist: OperatorWhitelist | None = None,
        registry: SanitizerRegistry | None = None,
    ):
        """
        Initialize a new clause builder.

        Args:
            config: Builder defaults; the environment-based config when omitted
            compare_validator: Override for the operator whitelist verdict,
                called as ``(allowed, operator, builder)``
            sanitizer_resolver: Override for sanitizer resolution,
                called as ``(transform, token, builder)``
            whitelist: Prebuilt whitelist, replaces ``compare_validator``
            registry: Prebuilt sanitizer registry, replaces ``sanitizer_resolver``
        """
        self._config = config or get_builder_config()
        self._whitelist = whitelist or OperatorWhitelist(compare_validator)
        self._registry = registry or SanitizerRegistry(sanitizer_resolver)
        self._state = ClauseState()
        self._accumulator = FragmentAccumulator()

    @property
    def config(self) -> BuilderConfig:
        return self._config

    @property
    def current_clause(self) -> ClauseKind | None:
        return self._state.current_clause

    @property
    def current_field(self) -> str | None:
        return self._state.current_field

    # ------------------------------------------------------------------
    # Clause and field selection
    # ------------------------------------------------------------------

    def select_clause(self, name: "str | ClauseKind") -> "ClauseBuilder":
        """Make a clause current; unknown names are ignored."""
        self._state.select_clause(name)
        return self

    def select_field(self, name: str) -> "ClauseBuilder":
        """Make a field current; the name is key-sanitized."""
        self._state.select_field(name)
        return self

    def reset(self) -> "ClauseBuilder":
        """Forget the current clause and field. Accumulated fragments are kept."""
        self._state.reset()
        return self

    def where(
        self,
        field: str,
        values: Any = _UNSET,
        sanitizer: SanitizerToken | None = None,
        compare: "Operator | str | None" = None,
        joiner: "BooleanJoiner | str | None" = None,
    ) -> "ClauseBuilder":
        """
        Select a field of the WHERE clause, optionally comparing it right away.

        Args:
            field: Field name
            values: Value or sequence of values to compare against. When
                omitted only the field and clause are selected.
            sanitizer: Sanitizer token or callable for the values
            compare: Comparison operator. Defaults to IN for a sequence of
                values and ``=`` otherwise.
            joiner: OR/AND used between per-value terms

        Returns:
            Self for method chaining
        """
        if field != self.current_field:
            self.select_field(field)

        self.select_clause(ClauseKind.WHERE)

        if values is _UNSET:
            return self

        if compare is None:
            compare = Operator.IN if is_value_sequence(values) else Operator.EQ

        return self.compare(compare, values, sanitizer, joiner)

    # ------------------------------------------------------------------
    # Policy lookups
    # ------------------------------------------------------------------

    def validate_compare(self, operator: "Operator | str") -> bool:
        """Check an operator against the whitelist and any override."""
        return self._whitelist.is_allowed(operator, self)

    def get_callback(self, token: SanitizerToken) -> Transform:
        """Resolve a sanitizer token or callable to the transform to apply."""
        return resolve_sanitizer_or_default(token, self._registry, self)

    # ------------------------------------------------------------------
    # Comparisons
    # ------------------------------------------------------------------

    def compare(
        self,
        compare: "Operator | str",
        values: Any,
        sanitizer: SanitizerToken | None = None,
        joiner: "BooleanJoiner | str | None" = None,
    ) -> "ClauseBuilder":
        """
        Apply an explicitly named comparison operator.

        Operators rejected by the whitelist are replaced with ``=``.
        """
        operator = resolve_operator_or_default(compare, self._whitelist, self)
        return self._apply(operator, values, sanitizer, joiner)

    def equals(self, values, sanitizer=None, joiner=None) -> "ClauseBuilder":
        """Handles '=' value comparison."""
        return self._apply(Operator.EQ, values, sanitizer, joiner)

    def not_equals(self, values, sanitizer=None, joiner=None) -> "ClauseBuilder":
        """Handles '!=' value comparison."""
        return self._apply(Operator.NEQ, values, sanitizer, joiner)

    def gt(self, values, sanitizer=None, joiner=None) -> "ClauseBuilder":
        """Handles '>' value comparison."""
        return self._apply(Operator.GT, values, sanitizer, joiner)

    def gte(self, values, sanitizer=None, joiner=None) -> "ClauseBuilder":
        """Handles '>=' value comparison."""
        return self._apply(Operator.GTE, values, sanitizer, joiner)

    def lt(self, values, sanitizer=None, joiner=None) -> "ClauseBuilder":
        """Handles '<' value comparison."""
        return self._apply(Operator.LT, values, sanitizer, joiner)

    def lte(self, values, sanitizer=None, joiner=None) -> "ClauseBuilder":
        """Handles '<=' value comparison."""
        return self._apply(Operator.LTE, values, sanitizer, joiner)

    def like(self, values, sanitizer=None, joiner=None) -> "ClauseBuilder":
        """Handles 'LIKE' value comparison."""
        return self._apply(Operator.LIKE, values, sanitizer, joiner)

    def not_like(self, values, sanitizer=None, joiner=None) -> "ClauseBuilder":
        """Handles 'NOT LIKE' value comparison."""
        return self._apply(Operator.NOT_LIKE, values, sanitizer, joiner)

    def in_(self, values, sanitizer=None, joiner=None) -> "ClauseBuilder":
        """
        Handles 'IN' value comparison. All values go into one list.

        Sets are accepted, but their members are emitted in iteration order.
        """
        return self._apply(Operator.IN, values, sanitizer, joiner)

    def not_in(self, values, sanitizer=None, joiner=None) -> "ClauseBuilder":
        """Handles 'NOT IN' value comparison."""
        return self._apply(Operator.NOT_IN, values, sanitizer, joiner)

    def between(self, values, sanitizer=None, joiner=None) -> "ClauseBuilder":
        """
        Handles 'BETWEEN' value comparison.

        Exactly two values are required, in an ordered sequence (not a set).
        """
        return self._apply(Operator.BETWEEN, values, sanitizer, joiner)

    def not_between(self, values, sanitizer=None, joiner=None) -> "ClauseBuilder":
        """Handles 'NOT BETWEEN' value comparison."""
        return self._apply(Operator.NOT_BETWEEN, values, sanitizer, joiner)

    def exists(self, values, sanitizer=None, joiner=None) -> "ClauseBuilder":
        """
        Handles 'EXISTS' comparison. Values are sub-expressions; no field is used.

        The default sanitizer casts to int, which turns a sub-expression into 0.
        Pass a callable sanitizer that returns the vetted sub-expression text.
        """
        return self._apply(Operator.EXISTS, values, sanitizer, joiner)

    def not_exists(self, values, sanitizer=None, joiner=None) -> "ClauseBuilder":
        """Handles 'NOT EXISTS' comparison. Needs a callable sanitizer, like exists()."""
        return self._apply(Operator.NOT_EXISTS, values, sanitizer, joiner)

    def _apply(
        self,
        operator: "Operator | str",
        values: Any,
        sanitizer: SanitizerToken | None,
        joiner: "BooleanJoiner | str | None",
    ) -> "ClauseBuilder":
        """Sanitize values, build one fragment and append it to the current clause."""
        operator_text = operator.value if isinstance(operator, Operator) else operator
        family = operator_family(operator)

        field = self.current_field
        if family is not OperatorFamily.EXISTENCE and not field:
            clause = self.current_clause
            raise InvalidStateError(operator_text, clause.value if clause else None, field)

        if sanitizer is None:
            sanitizer = self._config.default_sanitizer
        if joiner is None:
            joiner = self._config.default_joiner

        transform = self.get_callback(sanitizer)
        raw_values = self._normalize_values(values)

        if not raw_values:
            raise InvalidArgumentError(operator_text, "at least one value is required", 0)
        if family is OperatorFamily.RANGE and isinstance(values, _UNORDERED_TYPES):
            raise InvalidArgumentError(
                operator_text, "bounds must be given in order, not as a set", len(raw_values)
            )
        if family is OperatorFamily.RANGE and len(raw_values) != 2:
            raise InvalidArgumentError(
                operator_text, "exactly two values are required", len(raw_values)
            )

        sanitized = [str(transform(value)) for value in raw_values]
        fragment = self._build_fragment(
            operator_text, family, field, sanitized, resolve_joiner_or_default(joiner)
        )

        if self.current_clause is None:
            self.select_clause(ClauseKind.WHERE)

        self._accumulator.append(self.current_clause, fragment)
        return self

    @staticmethod
    def _normalize_values(values: Any) -> list[Any]:
        if is_value_sequence(values):
            return list(values)
        return [values]

    @staticmethod
    def _build_fragment(
        operator: str,
        family: OperatorFamily,
        field: str | None,
        values: list[str],
        joiner: BooleanJoiner,
    ) -> str:
        if family is OperatorFamily.SET:
            return f"{field} {operator} ({', '.join(values)})"

        if family is OperatorFamily.RANGE:
            return f"{field} {operator} {values[0]} AND {values[1]}"

        if family is OperatorFamily.EXISTENCE:
            terms = [f"{operator} ({value})" for value in values]
        else:
            terms = [f"{field} {operator} {value}" for value in values]

        if len(terms) == 1:
            return terms[0]

        return "(" + f" {joiner.value} ".join(terms) + ")"

    # ------------------------------------------------------------------
    # Assembly
    # ------------------------------------------------------------------

    def assemble(self) -> str:
        """
        Build the SQL text for the current clause.

        Fragments are joined with the configured separator (a single space by
        default); no boolean keyword is inserted between fragments. The clause
        and field selection is reset afterwards, while the stored fragments
        are kept until ``discard()`` is called.

        Returns:
            Clause text such as ``WHERE id = 5``, or an empty string when the
            current clause has no fragments
        """
        clause = self.current_clause
        fragments = self._accumulator.drain(clause)

        if not fragments:
            return ""

        sql = f"{clause.keyword} {self._config.fragment_separator.join(fragments)}"
        self._state.reset()

        logger.debug(f"Assembled {clause.keyword} clause: {sql}")
        return sql

    def fragments(self, clause: "str | ClauseKind | None" = None) -> list[str]:
        """Fragments accumulated for a clause, the current one by default."""
        target = self.current_clause if clause is None else ClauseKind.from_name(clause)
        return self._accumulator.drain(target)

    def discard(self, clause: "str | ClauseKind | None" = None) -> "ClauseBuilder":
        """
        Drop accumulated fragments.

        Args:
            clause: Clause to clear; every clause when omitted. Unknown clause
                names clear nothing.
        """
        if clause is None:
            self._accumulator.clear()
            return self

        target = ClauseKind.from_name(clause)
        if target is not None:
            self._accumulator.clear(target)
        return self
