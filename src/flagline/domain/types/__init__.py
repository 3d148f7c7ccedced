"""Shared domain types."""

from flagline.domain.types.arguments import (
    ArgumentSchema,
    ArgumentSpec,
    FlagOccurrence,
    ParsedArguments,
)
from flagline.domain.types.results import ParseResult, ParseStatus

__all__ = [
    "ArgumentSpec",
    "ArgumentSchema",
    "FlagOccurrence",
    "ParsedArguments",
    "ParseResult",
    "ParseStatus",
]
