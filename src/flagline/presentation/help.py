"""
Help rendering for command schemas.
"""

from __future__ import annotations

from rich.markup import escape
from rich.table import Table

from flagline.domain.types.arguments import ArgumentSchema, ArgumentSpec


def value_placeholder(spec: ArgumentSpec) -> str:
    """Return the placeholder shown after a flag that takes a value."""
    return spec.name.upper().replace("-", "_")


def format_flag(spec: ArgumentSpec) -> str:
    """Return the flag with its value placeholder, e.g. ``-n NAME``."""
    if not spec.takes_value:
        return spec.marker
    return f"{spec.marker} {value_placeholder(spec)}"


def format_usage(keyword: str, schema: ArgumentSchema) -> str:
    """
    Build the one-line usage string for a command.

    Optional flags are wrapped in brackets, e.g. ``take -l LIST_INDEX [-m]``.
    """
    parts = [keyword]
    for spec in schema:
        flag = format_flag(spec)
        parts.append(f"[{flag}]" if spec.optional else flag)
    return " ".join(parts)


def format_help_message(keyword: str, schema: ArgumentSchema, description: str = "") -> str:
    """Build the plain-text help message for a command, flags in schema order."""
    lines = []
    if description:
        lines.extend([description, ""])
    lines.append(f"Usage: {format_usage(keyword, schema)}")

    if len(schema):
        lines.extend(["", "Arguments:"])
        width = max(len(format_flag(spec)) for spec in schema)
        for spec in schema:
            status = "optional" if spec.optional else "required"
            lines.append(f"  {format_flag(spec):<{width}}  {spec.help_text} [{status}]".rstrip())
            if spec.value_prompt:
                lines.append(f"  {'':<{width}}  {spec.value_prompt}")
    return "\n".join(lines)


def build_help_table(keyword: str, schema: ArgumentSchema, description: str = "") -> Table:
    """Return a Rich table describing every flag of the command."""
    table = Table(
        title=f"[bold]{escape(format_usage(keyword, schema))}[/]",
        caption=escape(description) if description else None,
        show_lines=False,
    )
    table.add_column("Flag", style="cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Prompt", style="dim")
    table.add_column("Required", justify="center")

    for spec in schema:
        required = "[dim]optional[/]" if spec.optional else "[yellow]required[/]"
        table.add_row(escape(format_flag(spec)), escape(spec.help_text), escape(spec.value_prompt), required)
    return table
