"""Argument-related domain types."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import NamedTuple

from flagline.domain.exceptions import SchemaError

__all__ = ["ArgumentSpec", "ArgumentSchema", "FlagOccurrence", "ParsedArguments"]


@dataclass(frozen=True)
class ArgumentSpec:
    """Description of one flag accepted by a command.

    Attributes:
        name: Logical name under which the flag's value is stored
        marker: Literal token that introduces the flag (e.g. ``-n``)
        value_prompt: Prompt shown in help text for the expected value
        help_text: Short description of the flag
        takes_value: False for presence-only switches, whose value is always ``""``
        optional: Whether the flag may be omitted
    """

    name: str
    marker: str
    value_prompt: str = ""
    help_text: str = ""
    takes_value: bool = True
    optional: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise SchemaError("Argument name cannot be empty")
        if not self.marker:
            raise SchemaError(f"Argument '{self.name}' has an empty marker")
        if any(char.isspace() for char in self.marker):
            raise SchemaError(f"Marker '{self.marker}' of argument '{self.name}' contains whitespace")

    @property
    def is_required(self) -> bool:
        return not self.optional


class ArgumentSchema:
    """Ordered, immutable collection of ``ArgumentSpec`` for one command.

    Order only matters for help rendering and for which failure is reported first;
    parsing itself is order independent.
    """

    __slots__ = ("_specs", "_by_name", "_by_marker")

    def __init__(self, *specs: ArgumentSpec):
        by_name: dict[str, ArgumentSpec] = {}
        by_marker: dict[str, ArgumentSpec] = {}
        for spec in specs:
            if spec.marker in by_marker:
                raise SchemaError(f"Duplicate marker '{spec.marker}' in schema")
            if spec.name in by_name:
                raise SchemaError(f"Duplicate argument name '{spec.name}' in schema")
            by_marker[spec.marker] = spec
            by_name[spec.name] = spec

        self._specs: tuple[ArgumentSpec, ...] = tuple(specs)
        self._by_name = by_name
        self._by_marker = by_marker

    @classmethod
    def from_specs(cls, specs: Iterable[ArgumentSpec]) -> ArgumentSchema:
        return cls(*specs)

    def __iter__(self) -> Iterator[ArgumentSpec]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArgumentSchema):
            return NotImplemented
        return self._specs == other._specs

    def __hash__(self) -> int:
        return hash(self._specs)

    def __repr__(self) -> str:
        markers = ", ".join(spec.marker for spec in self._specs)
        return f"ArgumentSchema({markers})"

    def get(self, name: str) -> ArgumentSpec | None:
        """Look up a spec by logical name."""
        return self._by_name.get(name)

    def by_marker(self, marker: str) -> ArgumentSpec | None:
        """Look up a spec by marker token."""
        return self._by_marker.get(marker)

    @property
    def markers(self) -> tuple[str, ...]:
        return tuple(spec.marker for spec in self._specs)

    @property
    def required(self) -> tuple[ArgumentSpec, ...]:
        """Required specs, in schema order."""
        return tuple(spec for spec in self._specs if spec.is_required)


class FlagOccurrence(NamedTuple):
    """A flag marker found at ``index`` in the token sequence."""

    index: int
    spec: ArgumentSpec


class ParsedArguments(Mapping[str, str]):
    """Read-only mapping of logical argument name to the raw value typed by the user.

    Holds one entry per flag present in the input, in the order the flags appeared.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, str] | None = None):
        self._values: dict[str, str] = dict(values or {})

    def __getitem__(self, name: str) -> str:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ParsedArguments({self._values!r})"

    def to_dict(self) -> dict[str, str]:
        return dict(self._values)
