"""
triadcalc - left-to-right arithmetic expression evaluator.

Tokenizes expressions into numbers, operators, and parenthesized groups,
then folds them strictly left to right with no operator precedence.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

# Re-export commonly used names for convenience
from .core.errors import CalcError, DivisionByZeroError, StructuralError
from .core.expression import evaluate, evaluate_report, solve, tokenize


def _get_version() -> str:
    """Get version from installed package metadata."""
    try:
        return _metadata_version("triadcalc")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "CalcError",
    "DivisionByZeroError",
    "StructuralError",
    "evaluate",
    "evaluate_report",
    "solve",
    "tokenize",
]
