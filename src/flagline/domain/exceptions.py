"""Domain exceptions.

``ArgumentError`` subclasses describe mistakes in what the user typed; callers are
expected to turn them into a single line of feedback. ``HelpInvoked`` is not an
error at all: it tells the caller to show the command's help instead of running it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from flagline.domain.types.arguments import ArgumentSchema

__all__ = [
    "FlaglineError",
    "SchemaError",
    "ArgumentError",
    "DuplicateArgumentError",
    "MissingArgumentError",
    "UnexpectedValueError",
    "MissingValueError",
    "HelpInvoked",
    "UnknownCommandError",
]


class FlaglineError(Exception):
    """Base class for every exception raised by flagline."""


class SchemaError(FlaglineError, ValueError):
    """An argument spec or schema was declared incorrectly."""


class ArgumentError(FlaglineError):
    """The raw input does not satisfy the command's schema."""

    def __init__(self, marker: str, message: str):
        super().__init__(message)
        self.marker = marker
        self.message = message


class DuplicateArgumentError(ArgumentError):
    """A flag marker appears more than once in the input."""

    def __init__(self, marker: str):
        super().__init__(marker, f'Duplicate "{marker}" argument found')


class MissingArgumentError(ArgumentError):
    """A required flag is absent from the parsed arguments."""

    def __init__(self, marker: str):
        super().__init__(marker, f'Missing "{marker}" argument')


class UnexpectedValueError(ArgumentError):
    """Text follows a presence-only switch (strict mode only)."""

    def __init__(self, marker: str, value: str):
        super().__init__(marker, f'Unexpected value "{value}" after "{marker}" argument')
        self.value = value


class MissingValueError(ArgumentError):
    """A flag that takes a value has nothing after it (strict mode only)."""

    def __init__(self, marker: str):
        super().__init__(marker, f'Missing value for "{marker}" argument')


class HelpInvoked(FlaglineError):
    """No recognized flag was supplied; the caller should render help for ``schema``."""

    def __init__(self, schema: ArgumentSchema):
        super().__init__("Help invoked")
        self.schema = schema


class UnknownCommandError(FlaglineError):
    """A command keyword has no registered schema."""

    def __init__(self, keyword: str):
        super().__init__(f'Unknown command "{keyword}"')
        self.keyword = keyword
