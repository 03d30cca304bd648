"""Infix → RPN conversion (shunting-yard).

Data flow:
1. tokenize() scans the validated expression into Tokens
2. to_rpn() reorders them with an output list and an operator stack
3. The resulting list has no parentheses and goes to the evaluator

Operators pop anything on the stack with precedence >= their own, so every
operator is left-associative, ^ and √ included: 2^3^2 is (2^3)^2.
"""

from __future__ import annotations

import logging

from rpncalc.errors import UnbalancedParentheses
from rpncalc.models import DIGITS, OPERATOR_SYMBOLS, Token, TokenKind

logger = logging.getLogger(__name__)

_NUMBER_CHARS = DIGITS + "."


def tokenize(expression: str) -> list[Token]:
    """Split a validated expression into tokens.

    A run of digits and dots becomes one NUMBER token without checking how
    many dots it holds. Characters outside the alphabet are skipped; the
    validator has already rejected them.
    """
    tokens: list[Token] = []
    i, n = 0, len(expression)
    while i < n:
        char = expression[i]
        if char in _NUMBER_CHARS:
            start = i
            while i < n and expression[i] in _NUMBER_CHARS:
                i += 1
            tokens.append(Token.number(expression[start:i]))
            continue
        if char in OPERATOR_SYMBOLS:
            tokens.append(Token.operator(char))
        elif char in "()":
            tokens.append(Token.paren(char))
        i += 1
    return tokens


def to_rpn(expression: str) -> list[Token]:
    """Convert an infix expression to an RPN token list.

    Raises:
        UnbalancedParentheses: a ')' with no open '(' before it, or a '('
            still on the stack at the end of input.
    """
    output: list[Token] = []
    operators: list[Token] = []

    for token in tokenize(expression):
        if token.kind is TokenKind.NUMBER:
            output.append(token)
        elif token.kind is TokenKind.OPERATOR:
            while operators and operators[-1].precedence >= token.precedence:
                output.append(operators.pop())
            operators.append(token)
        elif token.kind is TokenKind.LEFT_PAREN:
            operators.append(token)
        else:
            while operators and operators[-1].kind is not TokenKind.LEFT_PAREN:
                output.append(operators.pop())
            if not operators:
                raise UnbalancedParentheses("unmatched ')'")
            operators.pop()

    while operators:
        top = operators.pop()
        if top.is_paren:
            raise UnbalancedParentheses(f"unmatched {top.text!r}")
        output.append(top)

    logger.debug("rpn for %r: %s", expression, format_rpn(output))
    return output


def format_rpn(tokens: list[Token]) -> str:
    """Render an RPN sequence as space-separated text: '2 3 4 * +'."""
    return " ".join(str(t) for t in tokens)
