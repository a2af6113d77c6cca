"""
Tokenizer for triadcalc expressions.

Converts an expression string into a sequence of number, operator, and
group tokens. Three anchored scanners are tried at each cursor position;
characters no scanner accepts are skipped one at a time.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field

from triadcalc.core.config import DEFAULT_MAX_DEPTH
from triadcalc.core.errors import NestingDepthError, at_position
from triadcalc.core.expression.number import INT64_MAX, INT64_MIN, Number, Operator

logger = logging.getLogger(__name__)

# Optional minus, digits, optional fraction. Anchored via re.match.
_NUMBER_RE = re.compile(r"-?[0-9]+(\.[0-9]+)?", re.ASCII)
_INT64_DIGITS = len(str(INT64_MAX))


@dataclass(frozen=True)
class NumberToken:
    """A numeric literal."""

    number: Number
    pos: int = field(default=0, compare=False)

    def render(self) -> str:
        return self.number.render()


@dataclass(frozen=True)
class OperatorToken:
    """One of ``+ - * / %``."""

    operator: Operator
    pos: int = field(default=0, compare=False)

    def render(self) -> str:
        return self.operator.value


@dataclass(frozen=True)
class GroupToken:
    """A parenthesized sub-expression, tokenized recursively."""

    tokens: tuple[Token, ...]
    pos: int = field(default=0, compare=False)

    def render(self) -> str:
        return f"({render_tokens(self.tokens)})"


Token = NumberToken | OperatorToken | GroupToken

ScanResult = tuple[int, Token | None]


def render_tokens(tokens: list[Token] | tuple[Token, ...]) -> str:
    """Join tokens back into compact expression text."""
    return "".join(token.render() for token in tokens)


# -- Scanners --


def scan_number(remaining: str, pos: int = 0) -> ScanResult:
    """Match a number literal at the start of ``remaining``."""
    m = _NUMBER_RE.match(remaining)
    if m is None:
        return 0, None

    text = m.group(0)
    # Wider than 19 digits never fits in 64 bits; skips int()'s digit limit too
    if m.group(1) is None and len(text.lstrip("-").lstrip("0")) <= _INT64_DIGITS:
        value = int(text)
        if INT64_MIN <= value <= INT64_MAX:
            return len(text), NumberToken(Number.integer(value), pos)
    # Fractions, and integers too wide for 64 bits, become decimals
    return len(text), NumberToken(Number.decimal(float(text)), pos)


def scan_operator(remaining: str, pos: int = 0) -> ScanResult:
    """Match a single operator character at the start of ``remaining``."""
    if not remaining:
        return 0, None
    try:
        operator = Operator(remaining[0])
    except ValueError:
        return 0, None
    return 1, OperatorToken(operator, pos)


def scan_group(
    remaining: str,
    pos: int = 0,
    *,
    depth: int = 0,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> ScanResult:
    """Match a balanced parenthesized group at the start of ``remaining``.

    The consumed length covers both parentheses. The text strictly between
    them is tokenized one nesting level deeper. An unbalanced ``(`` is no
    match.
    """
    if not remaining or remaining[0] != "(":
        return 0, None

    level = 0
    for i, c in enumerate(remaining):
        if c == "(":
            level += 1
        elif c == ")":
            level -= 1
            if level == 0:
                if depth + 1 > max_depth:
                    raise NestingDepthError(
                        f"Parentheses nest deeper than {max_depth} levels",
                        at_position(pos),
                    )
                inner = _tokenize(remaining[1:i], pos + 1, depth + 1, max_depth)
                return i + 1, GroupToken(tuple(inner), pos)

    return 0, None


# -- Driver --


def tokenize(source: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> list[Token]:
    """Tokenize an expression string into a list of tokens.

    Never fails on unrecognized input; only nesting deeper than
    ``max_depth`` raises.
    """
    return _tokenize(source, 0, 0, max_depth)


def _tokenize(source: str, offset: int, depth: int, max_depth: int) -> list[Token]:
    def group(remaining: str, pos: int) -> ScanResult:
        return scan_group(remaining, pos, depth=depth, max_depth=max_depth)

    scanners: tuple[Callable[[str, int], ScanResult], ...] = (scan_operator, scan_number, group)

    tokens: list[Token] = []
    i = 0
    n = len(source)

    while i < n:
        remaining = source[i:]
        for scanner in scanners:
            consumed, token = scanner(remaining, offset + i)
            if token is not None:
                tokens.append(token)
                i += consumed
                break
        else:
            logger.debug("Skipping unrecognized character %r at %d", source[i], offset + i)
            i += 1

    return tokens
