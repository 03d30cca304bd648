"""rpncalc — arithmetic expression evaluator.

Validates an infix expression, converts it to RPN with shunting-yard and
evaluates it on a float stack. Every submission is evaluated twice: as typed
(the final result) and with all '(' removed (the intermediate result).

Usage:
    python -m rpncalc eval "2 + 3 * 4"   # Result: 14.00
    python -m rpncalc repl               # Interactive shell
"""

from rpncalc.pipeline import calculate, evaluate

__all__ = ["calculate", "evaluate"]
