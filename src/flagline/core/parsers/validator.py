"""Required-flag validation for parsed arguments."""

from collections.abc import Mapping

from flagline.domain.exceptions import MissingArgumentError
from flagline.domain.types.arguments import ArgumentSchema


def check_required(schema: ArgumentSchema, parsed: Mapping[str, str]) -> None:
    """
    Ensure every required flag of ``schema`` is present in ``parsed``.

    Only the first missing flag, in schema order, is reported.

    Raises:
        MissingArgumentError: A required flag was not supplied
    """
    for spec in schema.required:
        if spec.name not in parsed:
            raise MissingArgumentError(spec.marker)
