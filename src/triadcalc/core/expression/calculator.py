"""
Entry points that take raw expression text to a result.

``evaluate`` raises on failure; ``evaluate_report`` folds the outcome into
an :class:`Evaluation` for callers that print or serialize it.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from triadcalc.core.config import CalcConfig
from triadcalc.core.errors import CalcError, StructuralError
from triadcalc.core.expression.number import Number, NumberKind
from triadcalc.core.expression.solver import solve
from triadcalc.core.expression.tokenizer import tokenize

logger = logging.getLogger(__name__)


class Evaluation(BaseModel):
    """Outcome of evaluating one expression."""

    expression: str = Field(description="Expression text after trimming")
    value: str | None = Field(default=None, description="Rendered result on success")
    kind: NumberKind | None = Field(default=None, description="Result variant on success")
    error: str | None = Field(default=None, description="Error message on failure")
    error_kind: str | None = Field(default=None, description="Error class, or structural reason")
    column: int | None = Field(default=None, description="1-indexed error column, if known")

    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        return self.error is None

    def summary_line(self) -> str:
        if self.ok:
            return f"Solved: {self.value}"
        return f"Error while solving: {self.error}"


def evaluate(expression: str, config: CalcConfig | None = None) -> Number:
    """Tokenize and solve ``expression``.

    Raises:
        CalcError: Any structural, arithmetic, or nesting failure.
    """
    config = config or CalcConfig()
    source = expression.strip()
    try:
        tokens = tokenize(source, max_depth=config.max_depth)
        return solve(tokens)
    except CalcError as e:
        raise e.with_source(source)


def evaluate_report(expression: str, config: CalcConfig | None = None) -> Evaluation:
    """Evaluate ``expression`` without raising CalcError."""
    source = expression.strip()
    try:
        result = evaluate(source, config)
    except CalcError as e:
        logger.info("Evaluation of %r failed: %s", source, e)
        error_kind = e.reason.value if isinstance(e, StructuralError) else type(e).__name__
        return Evaluation(
            expression=source,
            error=str(e),
            error_kind=error_kind,
            column=e.context.column if e.context else None,
        )
    return Evaluation(expression=source, value=result.render(), kind=result.kind)
