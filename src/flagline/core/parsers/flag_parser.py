"""Flag argument parser combining tokenizing, locating and value extraction."""

from collections.abc import Mapping

from flagline.core.parsers.extractor import extract_values
from flagline.core.parsers.locator import locate
from flagline.core.parsers.tokenizer import tokenize
from flagline.core.parsers.validator import check_required
from flagline.domain.exceptions import ArgumentError, HelpInvoked
from flagline.domain.types.arguments import ArgumentSchema, ParsedArguments
from flagline.domain.types.results import ParseResult


class FlagArgumentParser:
    """
    Parser for flag-delimited arguments (``-l 1 -n Panadol Extra``).

    Flags may appear in any order and values run until the next recognized flag,
    so they can contain spaces. Instances hold no per-call state and can be shared.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    def parse(self, schema: ArgumentSchema, raw: str) -> ParsedArguments:
        """
        Parse the flags of ``schema`` out of ``raw``.

        Required flags are not checked here; see ``check_required``.

        Args:
            schema: Flags recognized by the command
            raw: The text typed after the command keyword

        Returns:
            Mapping of logical name to value for every flag present

        Raises:
            HelpInvoked: No flag of the schema appears in ``raw``
            DuplicateArgumentError: A flag appears more than once
            UnexpectedValueError: Strict mode and text follows a presence-only switch
            MissingValueError: Strict mode and a value flag has nothing after it
        """
        tokens = tokenize(raw)
        occurrences = locate(schema, tokens)
        if not occurrences:
            raise HelpInvoked(schema)
        return ParsedArguments(extract_values(occurrences, tokens, strict=self.strict))

    def check_required(self, schema: ArgumentSchema, parsed: Mapping[str, str]) -> None:
        """Raise MissingArgumentError for the first required flag absent from ``parsed``."""
        check_required(schema, parsed)

    def run(self, schema: ArgumentSchema, raw: str) -> ParseResult:
        """
        Parse and validate ``raw``, reporting the outcome as a ParseResult.

        Args:
            schema: Flags recognized by the command
            raw: The text typed after the command keyword

        Returns:
            ParseResult tagged OK, HELP, DUPLICATE, MISSING, UNEXPECTED_VALUE or MISSING_VALUE
        """
        try:
            parsed = self.parse(schema, raw)
            self.check_required(schema, parsed)
        except HelpInvoked:
            return ParseResult.help(schema)
        except ArgumentError as exc:
            return ParseResult.failure(schema, exc)
        return ParseResult.success(schema, parsed)


def parse(schema: ArgumentSchema, raw: str, strict: bool = False) -> ParsedArguments:
    """Parse ``raw`` against ``schema``; see ``FlagArgumentParser.parse``."""
    return FlagArgumentParser(strict=strict).parse(schema, raw)


def parse_command(schema: ArgumentSchema, raw: str, strict: bool = False) -> ParseResult:
    """Parse and validate ``raw`` against ``schema``; see ``FlagArgumentParser.run``."""
    return FlagArgumentParser(strict=strict).run(schema, raw)
