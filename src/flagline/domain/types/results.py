"""Parse outcome types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from flagline.domain.exceptions import (
    ArgumentError,
    DuplicateArgumentError,
    MissingArgumentError,
    MissingValueError,
    UnexpectedValueError,
)
from flagline.domain.types.arguments import ArgumentSchema, ParsedArguments

__all__ = ["ParseStatus", "ParseResult"]


class ParseStatus(Enum):
    """Outcome of parsing one command line against a schema."""

    OK = "ok"
    HELP = "help"
    DUPLICATE = "duplicate"
    MISSING = "missing"
    UNEXPECTED_VALUE = "unexpected_value"
    MISSING_VALUE = "missing_value"


_STATUS_BY_ERROR: dict[type[ArgumentError], ParseStatus] = {
    DuplicateArgumentError: ParseStatus.DUPLICATE,
    MissingArgumentError: ParseStatus.MISSING,
    UnexpectedValueError: ParseStatus.UNEXPECTED_VALUE,
    MissingValueError: ParseStatus.MISSING_VALUE,
}


@dataclass(frozen=True)
class ParseResult:
    """Tagged result of a full parse: arguments on success, otherwise help or one error.

    A failed result never carries arguments.
    """

    status: ParseStatus
    schema: ArgumentSchema
    arguments: ParsedArguments | None = None
    error: ArgumentError | None = None

    @classmethod
    def success(cls, schema: ArgumentSchema, arguments: ParsedArguments) -> ParseResult:
        return cls(ParseStatus.OK, schema, arguments=arguments)

    @classmethod
    def help(cls, schema: ArgumentSchema) -> ParseResult:
        return cls(ParseStatus.HELP, schema)

    @classmethod
    def failure(cls, schema: ArgumentSchema, error: ArgumentError) -> ParseResult:
        status = _STATUS_BY_ERROR.get(type(error))
        if status is None:
            raise TypeError(f"Unsupported argument error: {type(error).__name__}")
        return cls(status, schema, error=error)

    @property
    def ok(self) -> bool:
        return self.status is ParseStatus.OK

    @property
    def is_help(self) -> bool:
        return self.status is ParseStatus.HELP

    @property
    def message(self) -> str | None:
        """The user-facing error line, if this result is a failure."""
        return self.error.message if self.error is not None else None
