"""
Number model for triadcalc expressions.

A Number is either an exact 64-bit integer or a floating-point decimal.
Arithmetic between two integers stays integral; a decimal operand promotes
the result to decimal.
"""

from __future__ import annotations

import math
from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from triadcalc.core.errors import DivisionByZeroError, IntegerOverflowError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class NumberKind(StrEnum):
    """Variants a Number can take."""

    INTEGER = "integer"
    DECIMAL = "decimal"


class Number(BaseModel):
    """An immutable integer or decimal value."""

    kind: NumberKind = Field(description="Integer or decimal variant")
    value: int | float = Field(description="The numeric value")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def integer(cls, value: int) -> Number:
        """Build an INTEGER, rejecting values outside the 64-bit range."""
        value = int(value)
        if not INT64_MIN <= value <= INT64_MAX:
            raise IntegerOverflowError(f"Integer result {value} does not fit in 64 bits")
        return cls(kind=NumberKind.INTEGER, value=value)

    @classmethod
    def decimal(cls, value: float) -> Number:
        return cls(kind=NumberKind.DECIMAL, value=float(value))

    @property
    def is_integer(self) -> bool:
        return self.kind == NumberKind.INTEGER

    @property
    def is_decimal(self) -> bool:
        return self.kind == NumberKind.DECIMAL

    def as_decimal(self) -> float:
        """Coerce to float for promoted arithmetic."""
        return float(self.value)

    def render(self) -> str:
        """Integers without a decimal point, decimals positionally with no exponent."""
        if self.is_integer:
            return str(int(self.value))
        value = float(self.value)
        if not math.isfinite(value):
            return repr(value)
        # Shortest repr digits, laid out without scientific notation
        text = format(Decimal(repr(value)), "f")
        return text if "." in text else f"{text}.0"

    def __str__(self) -> str:
        return self.render()


def _promoted(n1: Number, n2: Number) -> bool:
    return n1.is_decimal or n2.is_decimal


def _check_divisor(n2: Number, symbol: str) -> None:
    if n2.value == 0:
        label = "Division" if symbol == "/" else "Modulo"
        raise DivisionByZeroError(f"{label} by zero")


def _truncating_div(a: int, b: int) -> int:
    """Integer quotient rounded toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def add(n1: Number, n2: Number) -> Number:
    if _promoted(n1, n2):
        return Number.decimal(n1.as_decimal() + n2.as_decimal())
    return Number.integer(int(n1.value) + int(n2.value))


def subtract(n1: Number, n2: Number) -> Number:
    if _promoted(n1, n2):
        return Number.decimal(n1.as_decimal() - n2.as_decimal())
    return Number.integer(int(n1.value) - int(n2.value))


def multiply(n1: Number, n2: Number) -> Number:
    if _promoted(n1, n2):
        return Number.decimal(n1.as_decimal() * n2.as_decimal())
    return Number.integer(int(n1.value) * int(n2.value))


def divide(n1: Number, n2: Number) -> Number:
    """Divide; integer division truncates toward zero."""
    _check_divisor(n2, "/")
    if _promoted(n1, n2):
        return Number.decimal(n1.as_decimal() / n2.as_decimal())
    return Number.integer(_truncating_div(int(n1.value), int(n2.value)))


def modulo(n1: Number, n2: Number) -> Number:
    """Remainder with the sign of the dividend, for integers and decimals alike."""
    _check_divisor(n2, "%")
    if _promoted(n1, n2):
        dividend = n1.as_decimal()
        if math.isinf(dividend):
            return Number.decimal(math.nan)
        return Number.decimal(math.fmod(dividend, n2.as_decimal()))
    a, b = int(n1.value), int(n2.value)
    return Number.integer(a - b * _truncating_div(a, b))


class Operator(StrEnum):
    """Binary operators, keyed by their one-character spelling."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    MODULO = "%"


_OPERATIONS = {
    Operator.ADD: add,
    Operator.SUBTRACT: subtract,
    Operator.MULTIPLY: multiply,
    Operator.DIVIDE: divide,
    Operator.MODULO: modulo,
}


def apply(operator: Operator, n1: Number, n2: Number) -> Number:
    """Apply ``operator`` to two numbers using the promotion rule."""
    return _OPERATIONS[operator](n1, n2)
