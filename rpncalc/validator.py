"""Character-level validation, run before any parsing."""

from __future__ import annotations

from rpncalc.errors import InvalidCharacter
from rpncalc.models import ALLOWED_SYMBOLS, DIGITS


def strip_whitespace(expression: str) -> str:
    """Drop every whitespace character, including ones between digits."""
    return "".join(expression.split())


def validate(expression: str) -> None:
    """Raise InvalidCharacter on the first character outside the alphabet.

    Only ASCII digits count as digits, so '²' or '٣' are rejected here rather
    than failing later in float().
    """
    for position, char in enumerate(expression):
        if char not in DIGITS and char not in ALLOWED_SYMBOLS:
            raise InvalidCharacter(char, position)
