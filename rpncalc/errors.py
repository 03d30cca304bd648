"""Error taxonomy for the evaluation pipeline.

Every failure the validator, converter or evaluator can produce is a subclass
of EvaluationError. The pipeline boundary catches EvaluationError and turns it
into a failed Outcome; nothing here is meant to reach the shell as an
exception.
"""

from __future__ import annotations

from typing import Optional


class EvaluationError(ValueError):
    """Base class for all pipeline failures."""

    message = "evaluation error"

    def __init__(self, detail: Optional[str] = None) -> None:
        self.detail = detail
        super().__init__(self.describe())

    @property
    def kind(self) -> str:
        """Taxonomy label, e.g. 'DivisionByZero'."""
        return type(self).__name__

    def describe(self) -> str:
        if self.detail:
            return f"{self.message}: {self.detail}"
        return self.message


class InvalidCharacter(EvaluationError):
    message = "invalid expression"

    def __init__(self, char: str, position: int) -> None:
        self.char = char
        self.position = position
        super().__init__(f"{char!r} at position {position}")


class UnbalancedParentheses(EvaluationError):
    message = "unbalanced parentheses"


class InsufficientOperands(EvaluationError):
    message = "not enough operands"


class DivisionByZero(EvaluationError):
    message = "division by zero"


class NegativeSqrt(EvaluationError):
    message = "square root of a negative number"


class UnknownOperator(EvaluationError):
    message = "unknown operator"

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(symbol)


class ResultMismatch(EvaluationError):
    message = "evaluation error"
