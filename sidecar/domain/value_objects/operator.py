"""
Comparison operator value objects.

Operators are grouped into families that share one fragment shape:

- scalar: ``field = value``
- set: ``field IN (v1, v2)``
- range: ``field BETWEEN v1 AND v2``
- existence: ``EXISTS (subquery)``
"""

from enum import Enum


class OperatorFamily(Enum):
    """Fragment shape shared by a group of operators"""

    SCALAR = "scalar"
    SET = "set"
    RANGE = "range"
    EXISTENCE = "existence"


class Operator(Enum):
    """Comparison operator enumeration"""

    EQ = "="
    NEQ = "!="
    GT = ">"
    GTE = ">="
    LT = "<"
    LTE = "<="
    LIKE = "LIKE"
    NOT_LIKE = "NOT LIKE"
    IN = "IN"
    NOT_IN = "NOT IN"
    BETWEEN = "BETWEEN"
    NOT_BETWEEN = "NOT BETWEEN"
    EXISTS = "EXISTS"
    NOT_EXISTS = "NOT EXISTS"

    @property
    def family(self) -> OperatorFamily:
        return _FAMILIES.get(self, OperatorFamily.SCALAR)


_FAMILIES = {
    Operator.IN: OperatorFamily.SET,
    Operator.NOT_IN: OperatorFamily.SET,
    Operator.BETWEEN: OperatorFamily.RANGE,
    Operator.NOT_BETWEEN: OperatorFamily.RANGE,
    Operator.EXISTS: OperatorFamily.EXISTENCE,
    Operator.NOT_EXISTS: OperatorFamily.EXISTENCE,
}


class BooleanJoiner(Enum):
    """Keyword combining the per-value terms of one fragment"""

    OR = "OR"
    AND = "AND"
