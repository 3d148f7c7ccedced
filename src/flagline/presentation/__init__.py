"""Presentation helpers - help text and user-facing messages."""

from flagline.presentation.help import (
    build_help_table,
    format_flag,
    format_help_message,
    format_usage,
)
from flagline.presentation.messages import (
    format_error_message,
    format_result_text,
)

__all__ = [
    "build_help_table",
    "format_flag",
    "format_help_message",
    "format_usage",
    "format_error_message",
    "format_result_text",
]
