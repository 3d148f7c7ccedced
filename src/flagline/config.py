"""Runtime configuration read from the environment."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

_TRUTHY = {"true", "1", "yes"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass
class FlaglineConfig:
    """Configuration for the flagline command layer and CLI."""

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_console: bool = False

    # Parsing
    strict: bool = False  # Reject text after presence-only switches

    # Command layer
    commands_path: Optional[Path] = None
    prompt: str = "> "


def load_config(dotenv_path: Optional[str | Path] = None) -> FlaglineConfig:
    """
    Build a FlaglineConfig from ``FLAGLINE_*`` environment variables.

    Variables already set in the environment take precedence over the .env file.

    Args:
        dotenv_path: Explicit .env file; the nearest one is searched for when None

    Returns:
        FlaglineConfig populated from the environment, defaults elsewhere
    """
    load_dotenv(dotenv_path=dotenv_path)

    commands = os.getenv("FLAGLINE_COMMANDS", "").strip()
    return FlaglineConfig(
        log_level=os.getenv("FLAGLINE_LOG_LEVEL", "INFO").strip().upper(),
        log_file=os.getenv("FLAGLINE_LOG_FILE") or None,
        log_console=_env_flag("FLAGLINE_LOG_CONSOLE", False),
        strict=_env_flag("FLAGLINE_STRICT", False),
        commands_path=Path(commands) if commands else None,
        prompt=os.getenv("FLAGLINE_PROMPT", "> "),
    )
