"""
triadcalc expression engine.

Tokenizer, solver, and number model for flat arithmetic expressions
evaluated strictly left to right.

Usage:
    from triadcalc.core.expression import evaluate, tokenize, solve

    tokens = tokenize("(2+3)*4")
    result = solve(tokens)
    # result.render() == "20"
"""

from triadcalc.core.expression.calculator import Evaluation, evaluate, evaluate_report
from triadcalc.core.expression.number import Number, NumberKind, Operator, apply
from triadcalc.core.expression.solver import solve
from triadcalc.core.expression.tokenizer import (
    GroupToken,
    NumberToken,
    OperatorToken,
    Token,
    render_tokens,
    tokenize,
)

__all__ = [
    "Evaluation",
    "GroupToken",
    "Number",
    "NumberKind",
    "NumberToken",
    "Operator",
    "OperatorToken",
    "Token",
    "apply",
    "evaluate",
    "evaluate_report",
    "render_tokens",
    "solve",
    "tokenize",
]
