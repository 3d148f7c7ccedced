"""
User-facing result messages.
"""

from __future__ import annotations

import json

from rich.text import Text

from flagline.domain.types.results import ParseResult, ParseStatus


def format_error_message(message: str) -> str:
    return f"ERROR: {message}"


def format_result_text(keyword: str, result: ParseResult) -> Text:
    """
    Return the Rich Text line for a parse outcome.

    Help results are rendered separately from the schema, so only a short hint
    is returned for them.
    """
    if result.status is ParseStatus.OK:
        arguments = json.dumps(result.arguments.to_dict(), ensure_ascii=False)
        return Text.assemble(("SUCCESS: ", "bold green"), f"{keyword} {arguments}")
    if result.status is ParseStatus.HELP:
        return Text.assemble(("HELP: ", "bold yellow"), f"no arguments given for '{keyword}'")
    return Text.assemble(("ERROR: ", "bold red"), result.message or "")
