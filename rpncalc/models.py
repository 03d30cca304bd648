"""Data models for rpncalc.

TokenKind, Token, Outcome, ShellState and the shell events. These are the
typed structures that flow through converter → evaluator → pipeline → shell.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from rpncalc.errors import EvaluationError

# Closed operator set. √ sits at the same level as ^ and, like every other
# operator here, takes two operands.
OPERATOR_SYMBOLS = "+-*/^√"

PRECEDENCE: dict[str, int] = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
    "^": 3,
    "√": 3,
}

ALLOWED_SYMBOLS = OPERATOR_SYMBOLS + "()."
DIGITS = "0123456789"


def precedence(symbol: str) -> int:
    """Binding strength of an operator; 0 for anything else, including '('."""
    return PRECEDENCE.get(symbol, 0)


class TokenKind(str, Enum):
    """Token tags."""

    NUMBER = "number"
    OPERATOR = "operator"
    LEFT_PAREN = "left-paren"
    RIGHT_PAREN = "right-paren"


@dataclass(frozen=True)
class Token:
    """A scanned token.

    For NUMBER tokens `text` is the literal as typed ("3.14", or even "1.2.3");
    the evaluator is the one that parses it. For the other kinds it is the
    symbol itself.
    """

    kind: TokenKind
    text: str

    @classmethod
    def number(cls, text: str) -> Token:
        return cls(TokenKind.NUMBER, text)

    @classmethod
    def operator(cls, symbol: str) -> Token:
        return cls(TokenKind.OPERATOR, symbol)

    @classmethod
    def paren(cls, symbol: str) -> Token:
        kind = TokenKind.LEFT_PAREN if symbol == "(" else TokenKind.RIGHT_PAREN
        return cls(kind, symbol)

    @property
    def is_paren(self) -> bool:
        return self.kind in (TokenKind.LEFT_PAREN, TokenKind.RIGHT_PAREN)

    @property
    def precedence(self) -> int:
        if self.kind is TokenKind.OPERATOR:
            return precedence(self.text)
        return 0

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Outcome:
    """Result of one pipeline run: a value or the error that stopped it."""

    value: Optional[float] = None
    error: Optional[EvaluationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        """Human-readable failure label, empty on success."""
        return self.error.describe() if self.error else ""

    @classmethod
    def success(cls, value: float) -> Outcome:
        return cls(value=value)

    @classmethod
    def failure(cls, error: EvaluationError) -> Outcome:
        return cls(error=error)


# --- Shell state and events ---


@dataclass(frozen=True)
class ShellState:
    """Everything the interactive shell shows, as one immutable snapshot."""

    input: str = ""
    expression: str = ""
    result: str = ""
    intermediate: str = ""
    quitting: bool = False


@dataclass(frozen=True)
class Submit:
    """Evaluate the current input."""


@dataclass(frozen=True)
class Quit:
    """Leave the shell."""


@dataclass(frozen=True)
class Edit:
    """Replace the pending input with `value` (a raw keystroke edit)."""

    value: str


Event = Union[Submit, Quit, Edit]
