"""CLI tests: eval, rpn and repl through typer's CliRunner."""

import pytest
from typer.testing import CliRunner

from rpncalc.__main__ import app


@pytest.fixture
def runner():
    return CliRunner()


# --- eval ---

def test_eval_prints_both_results(runner):
    result = runner.invoke(app, ["eval", "2 + 3 * 4"])
    assert result.exit_code == 0
    assert "Result: 14.00" in result.output
    assert "Intermediate: 14.00" in result.output


def test_eval_with_rpn(runner):
    result = runner.invoke(app, ["eval", "(2+3)*4", "--rpn"])
    assert result.exit_code == 0
    assert "Result: 20.00" in result.output
    assert "RPN: 2 3 + 4 *" in result.output


def test_eval_failure_exits_nonzero(runner):
    result = runner.invoke(app, ["eval", "10/0"])
    assert result.exit_code == 1
    assert "Result: Error" in result.output
    assert "division by zero" in result.output


def test_eval_verbose(runner):
    result = runner.invoke(app, ["-v", "eval", "1+1"])
    assert result.exit_code == 0
    assert "Result: 2.00" in result.output


# --- rpn ---

def test_rpn_command(runner):
    result = runner.invoke(app, ["rpn", "2+3*4"])
    assert result.exit_code == 0
    assert result.output.strip() == "2 3 4 * +"


def test_rpn_unbalanced(runner):
    result = runner.invoke(app, ["rpn", "5+(3"])
    assert result.exit_code == 1
    assert "UnbalancedParentheses" in result.output


def test_rpn_invalid_character(runner):
    result = runner.invoke(app, ["rpn", "2+y"])
    assert result.exit_code == 1
    assert "InvalidCharacter" in result.output


# --- repl ---

def test_repl_session(runner):
    result = runner.invoke(app, ["repl"], input="2+3*4\n4√9\nquit\n")
    assert result.exit_code == 0
    assert "Result: 14.00" in result.output
    assert "Result: 2.00" in result.output


def test_repl_ends_on_eof(runner):
    result = runner.invoke(app, ["repl"], input="1+1\n")
    assert result.exit_code == 0
    assert "Result: 2.00" in result.output
