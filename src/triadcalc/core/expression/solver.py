"""
Solver for triadcalc token sequences.

Reduces a token list to a single Number by folding strictly left to right,
one operand/operator/operand triad at a time. There is no operator
precedence: ``2+3*4`` is ``(2+3)*4``. Parenthesized groups are solved
recursively and are the only way to change the grouping.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from triadcalc.core.errors import (
    CalcError,
    DivisionByZeroError,
    IntegerOverflowError,
    StructuralError,
    StructuralReason,
    at_position,
)
from triadcalc.core.expression.number import Number, apply
from triadcalc.core.expression.tokenizer import GroupToken, NumberToken, OperatorToken, Token

logger = logging.getLogger(__name__)


def solve(tokens: Sequence[Token]) -> Number:
    """Reduce a token sequence to a single Number.

    Args:
        tokens: Output of :func:`tokenize`, or the inner tokens of a group.

    Returns:
        The folded result.

    Raises:
        StructuralError: If the sequence is not operand (operator operand)+,
            or a single parenthesized group.
        DivisionByZeroError: If a divisor is zero.
        IntegerOverflowError: If an integer result leaves the 64-bit range.
    """
    return _solve(tokens, 0)


def _solve(tokens: Sequence[Token], pos: int) -> Number:
    if not tokens:
        raise StructuralError("Expression is empty", StructuralReason.EMPTY_EXPRESSION, at_position(pos))

    if len(tokens) == 1 and isinstance(tokens[0], GroupToken):
        group = tokens[0]
        return _solve(group.tokens, group.pos)

    if len(tokens) < 3:
        raise _incomplete(tokens[-1])

    first, op, last = tokens[0], tokens[1], tokens[2]
    operator = _expect_operator(op)
    result = _apply(operator, _resolve(first), _resolve(last))

    # Fold the remainder onto the running result, two tokens at a time
    rest = tokens[3:]
    for i in range(0, len(rest), 2):
        if i + 1 >= len(rest):
            raise _incomplete(rest[i])
        operator = _expect_operator(rest[i])
        result = _apply(operator, result, _resolve(rest[i + 1]))

    return result


def _resolve(token: Token) -> Number:
    """Turn an operand token into a Number."""
    if isinstance(token, NumberToken):
        return token.number
    if isinstance(token, GroupToken):
        return _solve(token.tokens, token.pos)
    raise StructuralError(
        f"Operand can't be an operator ({token.operator.value!r})",
        StructuralReason.OPERATOR_AS_OPERAND,
        at_position(token.pos),
    )


def _expect_operator(token: Token) -> OperatorToken:
    if not isinstance(token, OperatorToken):
        raise StructuralError(
            f"Expected an operator, got {token.render()!r}",
            StructuralReason.EXPECTED_OPERATOR,
            at_position(token.pos),
        )
    return token


def _apply(op: OperatorToken, left: Number, right: Number) -> Number:
    try:
        result = apply(op.operator, left, right)
    except (DivisionByZeroError, IntegerOverflowError) as e:
        raise type(e)(e.message, at_position(op.pos)) from e
    logger.debug("Folded %s %s %s = %s", left, op.operator.value, right, result)
    return result


def _incomplete(token: Token) -> CalcError:
    return StructuralError(
        "Incomplete expression: expected operand, operator, operand",
        StructuralReason.INCOMPLETE_EXPRESSION,
        at_position(token.pos),
    )
