"""Flag-based argument parsing for free-text command lines."""

from loguru import logger as _loguru

from flagline.core.parsers import FlagArgumentParser, check_required, parse, parse_command
from flagline.domain.exceptions import (
    ArgumentError,
    DuplicateArgumentError,
    FlaglineError,
    HelpInvoked,
    MissingArgumentError,
    MissingValueError,
    SchemaError,
    UnexpectedValueError,
    UnknownCommandError,
)
from flagline.domain.protocols import ArgumentParser
from flagline.domain.types import (
    ArgumentSchema,
    ArgumentSpec,
    FlagOccurrence,
    ParsedArguments,
    ParseResult,
    ParseStatus,
)

# Library use stays silent until an application calls setup_logger()
_loguru.disable("flagline")

__all__ = [
    "ArgumentSpec",
    "ArgumentSchema",
    "FlagOccurrence",
    "ParsedArguments",
    "ParseResult",
    "ParseStatus",
    "ArgumentParser",
    "FlagArgumentParser",
    "parse",
    "parse_command",
    "check_required",
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
