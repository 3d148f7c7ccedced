"""Argument parser protocol."""

from typing import Protocol, runtime_checkable

from flagline.domain.types.arguments import ArgumentSchema, ParsedArguments

__all__ = ["ArgumentParser"]


@runtime_checkable
class ArgumentParser(Protocol):
    """Protocol for flag parsers.

    This protocol defines the interface for turning the raw text typed after a
    command keyword into a mapping of logical argument names to values.
    """

    def parse(self, schema: ArgumentSchema, raw: str) -> ParsedArguments:
        """Parse arguments from the raw input.

        Args:
            schema: Flags recognized by the command
            raw: The text typed after the command keyword

        Returns:
            Mapping of logical argument name to raw value, one entry per flag found

        Raises:
            HelpInvoked: No flag of the schema appears in ``raw``
            DuplicateArgumentError: A flag appears more than once
        """
        ...
