"""RPN evaluation on a float stack.

Every operator takes exactly two operands, √ included: it pops b then a,
returns sqrt(a) and drops b. So '4√9' is 2.0 and '√9' has nothing to pair
with and fails with InsufficientOperands.
"""

from __future__ import annotations

import logging
import math
import operator
import sys
from typing import Optional

from rpncalc.errors import (
    DivisionByZero,
    InsufficientOperands,
    NegativeSqrt,
    ResultMismatch,
    UnknownOperator,
)
from rpncalc.models import Token, TokenKind

logger = logging.getLogger(__name__)

_ARITHMETIC = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
}


# Overflow shortcut only for bases at least this far from magnitude 1; below
# it, rounding drift over many steps could move the overflow point.
_MIN_LOG_BASE = 1e-12
_LOG_MAX = math.log(sys.float_info.max)


def _overflows(base: float, count: int) -> bool:
    """True when `count` multiplications by |base| > 1 surely pass float max."""
    if not math.isfinite(base) or abs(base) <= 1.0:
        return False
    log_base = math.log(abs(base))
    return log_base >= _MIN_LOG_BASE and count * log_base > _LOG_MAX + 1.0


def power(base: float, exponent: float) -> float:
    """Multiply 1.0 by `base`, int(exponent) times.

    The exponent is truncated toward zero, and zero or negative counts leave
    the product at 1.0: power(2, -1) is 1.0, power(2, 2.9) is 4.0. A
    non-finite exponent also gives 1.0.

    The loop stops as soon as the product's magnitude stops changing (zero,
    inf, |base| == 1, or a subnormal that rounds back to itself); after that
    only the sign can flip, and it is settled by parity. A count that surely
    overflows skips the loop. Either way the value is the full loop's value.
    """
    if not math.isfinite(exponent):
        return 1.0
    count = int(exponent)
    if count <= 0:
        return 1.0
    if _overflows(base, count):
        return -math.inf if base < 0 and count % 2 == 1 else math.inf

    result = 1.0
    for done in range(count):
        product = result * base
        if math.isnan(product):
            return product
        if abs(product) == abs(result):
            if math.copysign(1.0, base) < 0 and (count - done) % 2 == 1:
                return -result
            return result
        result = product
    return result


def apply_operator(symbol: str, a: float, b: float) -> float:
    """Reduce two operands with one of the six operator symbols."""
    if symbol in _ARITHMETIC:
        return _ARITHMETIC[symbol](a, b)
    if symbol == "/":
        if b == 0.0:
            raise DivisionByZero()
        return a / b
    if symbol == "^":
        return power(a, b)
    if symbol == "√":
        if a < 0:
            raise NegativeSqrt(f"√{a:g}")
        return math.sqrt(a)
    raise UnknownOperator(symbol)


def _parse_number(token: Token) -> Optional[float]:
    if token.kind is not TokenKind.NUMBER:
        return None
    try:
        return float(token.text)
    except ValueError:
        return None


def evaluate_rpn(tokens: list[Token]) -> float:
    """Run an RPN sequence and return the single value left on the stack.

    A NUMBER literal float() rejects ('1.2.3', '.') is treated like any other
    non-number: it needs two operands and then fails as an unknown operator.

    Raises:
        InsufficientOperands, DivisionByZero, NegativeSqrt, UnknownOperator,
        ResultMismatch.
    """
    stack: list[float] = []

    for token in tokens:
        value = _parse_number(token)
        if value is not None:
            stack.append(value)
            continue

        if len(stack) < 2:
            raise InsufficientOperands(f"{token.text!r} needs two operands")
        b = stack.pop()
        a = stack.pop()
        stack.append(apply_operator(token.text, a, b))

    if len(stack) != 1:
        raise ResultMismatch(f"{len(stack)} values left on the stack")

    logger.debug("evaluated %d tokens -> %r", len(tokens), stack[0])
    return stack[0]
