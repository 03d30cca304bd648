"""Runtime settings for the rpncalc shell, read from the environment.

Only the shell and CLI read these; the evaluation pipeline takes no
configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_CHAR_LIMIT = 50
DEFAULT_PROMPT = "Enter expression"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Shell settings."""

    char_limit: int = DEFAULT_CHAR_LIMIT
    prompt: str = DEFAULT_PROMPT
    log_level: str = DEFAULT_LOG_LEVEL


def _int_or_default(raw: Optional[str], default: int) -> int:
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _log_level_or_default(raw: Optional[str]) -> str:
    level = (raw or "").strip().upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from RPNCALC_* variables.

    Args:
        env: Mapping to read from. Defaults to os.environ.
    """
    env = os.environ if env is None else env
    return Settings(
        char_limit=_int_or_default(env.get("RPNCALC_CHAR_LIMIT"), DEFAULT_CHAR_LIMIT),
        prompt=env.get("RPNCALC_PROMPT") or DEFAULT_PROMPT,
        log_level=_log_level_or_default(env.get("RPNCALC_LOG_LEVEL")),
    )
