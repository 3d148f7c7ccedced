"""Extracting flag values from the spans between located markers."""

from collections.abc import Mapping, Sequence

from flagline.domain.exceptions import MissingValueError, UnexpectedValueError
from flagline.domain.types.arguments import ArgumentSpec, FlagOccurrence
from flagline.logger import get_logger

logger = get_logger("parsers")


def join_span(tokens: Sequence[str], start: int, end: int) -> str:
    """Join ``tokens[start:end]`` with single spaces."""
    return " ".join(tokens[start:end]).strip()


def ordered_occurrences(occurrences: Mapping[int, ArgumentSpec]) -> list[FlagOccurrence]:
    """Order located flags by their position in the input."""
    return [FlagOccurrence(index, spec) for index, spec in sorted(occurrences.items())]


def extract_values(
    occurrences: Mapping[int, ArgumentSpec],
    tokens: Sequence[str],
    strict: bool = False,
) -> dict[str, str]:
    """
    Build the value of every located flag from the tokens that follow it.

    A flag's value is everything between its marker and the next located marker,
    or the end of the input for the last one. Presence-only switches always get
    ``""``; whatever follows them is dropped unless ``strict`` is set. In strict
    mode a flag that takes a value must also be followed by one.

    Examples:
        tokens '-n Panadol Extra -l 2' -> {'name': 'Panadol Extra', 'list_index': '2'}
        tokens '-m -n Vitamin C' -> {'morning': '', 'name': 'Vitamin C'}

    Args:
        occurrences: Token index to spec, as returned by ``locate``
        tokens: Tokenized raw input
        strict: Reject text following a presence-only switch and empty values

    Returns:
        Dictionary of logical name to value, in input order

    Raises:
        UnexpectedValueError: ``strict`` is set and a switch is followed by text
        MissingValueError: ``strict`` is set and a value flag has no value
    """
    ordered = ordered_occurrences(occurrences)
    values: dict[str, str] = {}

    for position, occurrence in enumerate(ordered):
        end = ordered[position + 1].index if position + 1 < len(ordered) else len(tokens)
        span = join_span(tokens, occurrence.index + 1, end)
        spec = occurrence.spec

        if spec.takes_value:
            if not span and strict:
                raise MissingValueError(spec.marker)
            values[spec.name] = span
        else:
            if span and strict:
                raise UnexpectedValueError(spec.marker, span)
            values[spec.name] = ""

        logger.debug(f"Parsed argument '{spec.name}' = '{values[spec.name]}'")

    return values
