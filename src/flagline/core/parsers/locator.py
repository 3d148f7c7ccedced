"""Locating flag markers in a token sequence."""

from collections.abc import Sequence

from flagline.domain.exceptions import DuplicateArgumentError
from flagline.domain.types.arguments import ArgumentSchema, ArgumentSpec
from flagline.logger import get_logger

logger = get_logger("parsers")


def find_marker(tokens: Sequence[str], marker: str) -> int | None:
    """
    Find the single position of ``marker`` in ``tokens``.

    Only two lookups are made: the first and the last exact match. Whenever the
    marker occurs more than once these differ, however many repeats there are.

    Args:
        tokens: Token sequence to search
        marker: Flag marker to look for

    Returns:
        Index of the marker, or None when it is absent

    Raises:
        DuplicateArgumentError: The marker occurs more than once
    """
    try:
        first = tokens.index(marker)
    except ValueError:
        return None

    last = len(tokens) - 1 - tokens[::-1].index(marker)
    if first != last:
        raise DuplicateArgumentError(marker)
    return first


def locate(schema: ArgumentSchema, tokens: Sequence[str]) -> dict[int, ArgumentSpec]:
    """
    Map token index to spec for every schema flag present in ``tokens``.

    Specs are checked in schema order, so the first duplicated flag in schema order
    is the one reported. An empty result means no recognized flag was typed.

    Args:
        schema: Flags recognized by the command
        tokens: Tokenized raw input

    Returns:
        Dictionary of token index to spec, in ascending index order

    Raises:
        DuplicateArgumentError: A flag marker occurs more than once
    """
    found: dict[int, ArgumentSpec] = {}
    for spec in schema:
        index = find_marker(tokens, spec.marker)
        if index is not None:
            found[index] = spec

    occurrences = dict(sorted(found.items()))
    logger.debug(f"Located flags: {[(index, spec.marker) for index, spec in occurrences.items()]}")
    return occurrences
