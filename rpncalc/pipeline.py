"""Evaluation pipeline — validate → convert → evaluate → format.

Data flow per submission:
1. calculate() the user's text → final result
2. calculate() it again with every '(' removed → intermediate result
3. Render both as two-decimal strings

calculate() strips whitespace itself, so both runs take the raw text.

calculate() is the boundary where EvaluationError stops: it returns an
Outcome instead of raising.
"""

from __future__ import annotations

import logging

from rpncalc.converter import to_rpn
from rpncalc.errors import EvaluationError
from rpncalc.evaluator import evaluate_rpn
from rpncalc.models import Outcome
from rpncalc.validator import strip_whitespace, validate

logger = logging.getLogger(__name__)

# Shown in place of the final result when the primary run fails.
ERROR_MARKER = "Error"


def format_result(value: float) -> str:
    """Fixed two decimal places: 0.1 → '0.10', 1024 → '1024.00'."""
    return f"{value:.2f}"


def calculate(expression: str) -> Outcome:
    """Run the whole pipeline once, capturing any failure in the Outcome."""
    expr = strip_whitespace(expression)
    try:
        validate(expr)
        value = evaluate_rpn(to_rpn(expr))
    except EvaluationError as e:
        logger.debug("%r failed: %s (%s)", expr, e.kind, e.describe())
        return Outcome.failure(e)
    return Outcome.success(value)


def relax(expression: str) -> str:
    """The intermediate-run input: every '(' dropped, ')' kept."""
    return expression.replace("(", "")


def evaluate(expression: str) -> tuple[str, str]:
    """Evaluate user input, returning (final_result, intermediate_result).

    On success both are formatted numbers, the intermediate one blank if the
    relaxed rerun failed. When the final run fails the pair is
    (ERROR_MARKER, failure message).
    """
    final = calculate(expression)
    if not final.ok:
        return ERROR_MARKER, final.message

    relaxed = calculate(relax(expression))
    if not relaxed.ok:
        logger.debug("intermediate run dropped: %s", relaxed.message)
        return format_result(final.value), ""
    return format_result(final.value), format_result(relaxed.value)
