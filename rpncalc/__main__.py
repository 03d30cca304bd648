"""CLI for rpncalc.

Usage:
    python -m rpncalc eval "2 + 3 * 4"         # Final and intermediate results
    python -m rpncalc eval "(2+3)*4" --rpn     # ...plus the RPN form
    python -m rpncalc rpn "2^3^2"              # Show the RPN sequence only
    python -m rpncalc repl                     # Interactive shell
    python -m rpncalc -v eval "10/0"           # Debug logging on stderr
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from rpncalc.config import load_settings
from rpncalc.converter import format_rpn, to_rpn
from rpncalc.errors import EvaluationError
from rpncalc.models import ShellState
from rpncalc.pipeline import ERROR_MARKER, evaluate
from rpncalc.shell import render, run_repl
from rpncalc.validator import strip_whitespace, validate

app = typer.Typer(
    name="rpncalc",
    help="Arithmetic expression evaluator (shunting-yard + RPN)",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else load_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log pipeline stages at DEBUG"),
) -> None:
    """Evaluate infix arithmetic: + - * / ^ √ and parentheses."""
    _configure_logging(verbose)


@app.command("eval")
def cmd_eval(
    expression: str = typer.Argument(help="Expression, e.g. '(2+3)*4'"),
    show_rpn: bool = typer.Option(False, "--rpn", help="Also print the RPN form"),
) -> None:
    """Evaluate an expression and print the final and intermediate results."""
    result, intermediate = evaluate(expression)
    state = ShellState(expression=expression, result=result, intermediate=intermediate)
    console.print(render(state))

    if show_rpn and result != ERROR_MARKER:
        console.print(f"[dim]RPN: {format_rpn(to_rpn(strip_whitespace(expression)))}[/dim]")

    if result == ERROR_MARKER:
        raise typer.Exit(1)


@app.command("rpn")
def cmd_rpn(
    expression: str = typer.Argument(help="Expression to convert"),
) -> None:
    """Print the RPN (postfix) form of an expression."""
    expr = strip_whitespace(expression)
    try:
        validate(expr)
        tokens = to_rpn(expr)
    except EvaluationError as e:
        err_console.print(f"[red]{e.kind}:[/red] {e.describe()}")
        raise typer.Exit(1)
    console.print(format_rpn(tokens), markup=False, highlight=False)


@app.command("repl")
def cmd_repl() -> None:
    """Interactive shell: type an expression, press Enter, repeat."""
    run_repl(console, load_settings())


if __name__ == "__main__":
    app()
