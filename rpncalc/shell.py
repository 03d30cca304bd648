"""Interactive shell around the pipeline.

The shell is split in three:
- update(): pure (state, event) → state transition, no I/O
- render(): builds the rich view for a state
- run_repl(): the line-based loop that reads input and feeds events in

The pipeline knows nothing about any of this.
"""

from __future__ import annotations

import dataclasses
from typing import Callable, Optional

from rich.console import Console, Group
from rich.text import Text

from rpncalc.config import Settings, load_settings
from rpncalc.models import Edit, Event, Quit, ShellState, Submit
from rpncalc.pipeline import evaluate

HELP_TEXT = "Press Enter to evaluate, type 'quit' or press Ctrl+C to exit."
QUIT_WORDS = ("quit", "exit")

# 256-color palette indices, matching the original terminal colors.
RESULT_STYLE = "color(10)"
INTERMEDIATE_STYLE = "color(12)"
HELP_STYLE = "color(8)"


def update(state: ShellState, event: Event, settings: Optional[Settings] = None) -> ShellState:
    """Apply one event to the shell state and return the new state."""
    settings = settings or Settings()
    if isinstance(event, Quit):
        return dataclasses.replace(state, quitting=True)
    if isinstance(event, Edit):
        return dataclasses.replace(state, input=event.value[: settings.char_limit])
    if isinstance(event, Submit):
        result, intermediate = evaluate(state.input)
        return dataclasses.replace(
            state,
            expression=state.input,
            result=result,
            intermediate=intermediate,
            input="",
        )
    raise TypeError(f"unknown shell event: {event!r}")


def events_for_line(line: str) -> list[Event]:
    """Translate one line of typed input into shell events."""
    if line.strip().lower() in QUIT_WORDS:
        return [Quit()]
    return [Edit(line), Submit()]


def render(state: ShellState) -> Group:
    """Result, intermediate and help lines for the current state."""
    return Group(
        Text(f"Result: {state.result}", style=RESULT_STYLE),
        Text(f"Intermediate: {state.intermediate}", style=INTERMEDIATE_STYLE),
        Text(HELP_TEXT, style=HELP_STYLE),
    )


def run_repl(
    console: Console,
    settings: Optional[Settings] = None,
    read_line: Optional[Callable[[str], str]] = None,
) -> ShellState:
    """Read lines until the user quits; returns the final state.

    Args:
        console: Where the view is drawn.
        settings: Shell settings. Defaults to load_settings().
        read_line: Prompt-and-read function. Defaults to console.input.
    """
    settings = settings or load_settings()
    read_line = read_line or console.input
    prompt = f"{settings.prompt} > "
    state = ShellState()

    while not state.quitting:
        console.print(render(state))
        try:
            line = read_line(prompt)
        except (EOFError, KeyboardInterrupt):
            state = update(state, Quit(), settings)
            break
        for event in events_for_line(line):
            state = update(state, event, settings)

    return state
