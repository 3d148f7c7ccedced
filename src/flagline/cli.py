"""Typer-based CLI for parsing command lines against configured schemas."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from flagline.application.command_config import load_commands_config
from flagline.application.command_registry import CommandRegistry
from flagline.config import FlaglineConfig, load_config
from flagline.domain.exceptions import SchemaError, UnknownCommandError
from flagline.domain.types.results import ParseResult, ParseStatus
from flagline.logger import get_logger, setup_logger
from flagline.presentation.help import build_help_table
from flagline.presentation.messages import format_error_message, format_result_text

logger = get_logger("cli")
SHELL_KEYWORDS = ("help", "quit")
app = typer.Typer(
    name="flagline",
    help="Parse flag-based command lines against JSON command schemas",
    epilog="""
    Examples:
    $ flagline parse --commands commands.json take -- "-l 1 -m"
    $ flagline shell --commands commands.json
    """,
    add_completion=False,
)


def _load_registry(commands: Optional[Path], config: FlaglineConfig, strict: bool) -> CommandRegistry:
    path = commands or config.commands_path
    if path is None:
        typer.echo(format_error_message("No command configuration given (use --commands or FLAGLINE_COMMANDS)"))
        raise typer.Exit(code=2)

    try:
        commands_config = load_commands_config(path)
        return CommandRegistry.from_config(commands_config, strict=strict or config.strict)
    except (FileNotFoundError, json.JSONDecodeError, ValidationError, SchemaError) as exc:
        typer.echo(format_error_message(f"Cannot load commands from {path}: {exc}"))
        raise typer.Exit(code=2)


def _render_result(console: Console, registry: CommandRegistry, keyword: str, result: ParseResult) -> None:
    if result.status is ParseStatus.HELP:
        console.print(build_help_table(keyword, result.schema, registry.describe(keyword)))
    elif result.ok:
        typer.echo(json.dumps(result.arguments.to_dict(), ensure_ascii=False))
    else:
        console.print(format_result_text(keyword, result))


def _sanitize_command(text: str) -> str:
    """Normalize command text by removing carriage returns and trimming whitespace."""
    return text.replace("\r", "").strip()


def _read_command(prompt: str) -> str:
    """Read a command from stdin, ensuring carriage returns are stripped."""
    typer.echo(prompt, nl=False)
    sys.stdout.flush()

    line = sys.stdin.readline()
    if line == "":
        raise EOFError
    return _sanitize_command(line)


def _show_commands(registry: CommandRegistry) -> None:
    typer.echo("Commands:")
    width = max((len(keyword) for keyword in registry.keywords()), default=0)
    for keyword in registry.keywords():
        typer.echo(f"  {keyword:<{width}}  {registry.describe(keyword)}".rstrip())
    typer.echo(f"  {'help':<{width}}  Show this list")
    typer.echo(f"  {'quit':<{width}}  Exit the shell")


def _dispatch_line(console: Console, registry: CommandRegistry, line: str) -> bool:
    line = _sanitize_command(line)

    if not line:
        return True

    if line == "quit":
        return False

    if line == "help":
        _show_commands(registry)
        return True

    try:
        keyword, result = registry.dispatch(line)
    except UnknownCommandError as exc:
        typer.echo(format_error_message(f"{exc}. Type 'help' to list commands."))
        return True

    _render_result(console, registry, keyword, result)
    return True


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Log debug records to stderr"),
) -> None:
    """Load configuration from the environment and set up logging."""
    config = load_config()
    if debug:
        config.log_level = "DEBUG"
        config.log_console = True
    setup_logger(
        log_file=config.log_file,
        log_level=config.log_level,
        console_output=config.log_console,
    )
    ctx.obj = config


@app.command()
def parse(
    ctx: typer.Context,
    keyword: str = typer.Argument(..., help="Command keyword, e.g. take"),
    raw: str = typer.Argument("", help="Text typed after the keyword; put it after -- if it starts with a flag"),
    commands: Optional[Path] = typer.Option(None, "--commands", "-c", help="JSON command configuration"),
    strict: bool = typer.Option(False, "--strict", help="Reject text after presence-only switches and flags without values"),
) -> None:
    """Parse one command line and print its arguments as JSON."""
    registry = _load_registry(commands, ctx.obj, strict)
    console = Console()

    try:
        _, result = registry.dispatch(f"{keyword} {raw}")
    except UnknownCommandError as exc:
        typer.echo(format_error_message(str(exc)))
        raise typer.Exit(code=2)

    _render_result(console, registry, keyword, result)
    if not result.ok and not result.is_help:
        raise typer.Exit(code=1)


@app.command()
def shell(
    ctx: typer.Context,
    commands: Optional[Path] = typer.Option(None, "--commands", "-c", help="JSON command configuration"),
    strict: bool = typer.Option(False, "--strict", help="Reject text after presence-only switches and flags without values"),
) -> None:
    """Read command lines interactively and show how each one parses."""
    config: FlaglineConfig = ctx.obj
    registry = _load_registry(commands, config, strict)
    reserved = [keyword for keyword in SHELL_KEYWORDS if keyword in registry]
    if reserved:
        typer.echo(format_error_message(f"Commands reserved by the shell cannot be configured: {', '.join(reserved)}"))
        raise typer.Exit(code=2)

    console = Console()

    typer.echo("")
    _show_commands(registry)
    typer.echo("")

    while True:
        try:
            line = _read_command(config.prompt)
        except (KeyboardInterrupt, EOFError):
            typer.echo("\nGoodbye!")
            break

        if not _dispatch_line(console, registry, line):
            break


if __name__ == "__main__":
    app()
