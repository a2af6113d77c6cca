"""
Error types for triadcalc tokenizing, solving, and configuration.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional


class CalcError(Exception):
    """Base exception for all triadcalc errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.message} ({self.context.format()})"
        return self.message

    def with_source(self, source: str) -> "CalcError":
        """Attach the expression text so the context can render a snippet."""
        if self.context and self.context.source is None:
            self.context = ErrorContext(column=self.context.column, source=source)
        return self


class StructuralReason(StrEnum):
    """Why a token sequence could not be reduced."""

    EMPTY_EXPRESSION = "empty_expression"
    INCOMPLETE_EXPRESSION = "incomplete_expression"
    EXPECTED_OPERATOR = "expected_operator"
    OPERATOR_AS_OPERAND = "operator_as_operand"


class StructuralError(CalcError):
    """
    Raised when a token sequence does not have the operand/operator/operand shape.

    Examples:
    - Empty expression or empty parentheses
    - A lone number, or a trailing operator
    - Two operands in a row
    - An operator where an operand is expected
    """

    def __init__(
        self,
        message: str,
        reason: StructuralReason,
        context: Optional["ErrorContext"] = None,
    ):
        self.reason = reason
        super().__init__(message, context)


class DivisionByZeroError(CalcError):
    """Raised when the right operand of `/` or `%` is zero."""

    pass


class IntegerOverflowError(CalcError):
    """Raised when an integer result leaves the signed 64-bit range."""

    pass


class NestingDepthError(CalcError):
    """Raised when parentheses nest deeper than the configured bound."""

    pass


class ConfigError(CalcError):
    """Raised when a configuration value is missing or malformed."""

    pass


@dataclass
class ErrorContext:
    """
    Location of an error inside the expression text.

    Attributes:
        column: Column number (1-indexed)
        source: Optional expression text used to render a caret snippet
    """

    column: int
    source: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "column 5"
        """
        return f"column {self.column}"

    def snippet(self) -> str:
        """Render the expression with a ``^`` marker under the error column."""
        if self.source is None:
            return ""
        marker = " " * (self.column - 1) + "^"
        return f"{self.source}\n{marker}"


def at_position(pos: int) -> ErrorContext:
    """Build a context from a 0-indexed token offset."""
    return ErrorContext(column=pos + 1)
