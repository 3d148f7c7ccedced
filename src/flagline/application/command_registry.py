"""Registry mapping command keywords to their argument schemas."""

from __future__ import annotations

from typing import NamedTuple

from flagline.application.command_config import CommandsConfig
from flagline.core.parsers.flag_parser import FlagArgumentParser
from flagline.domain.exceptions import SchemaError, UnknownCommandError
from flagline.domain.types.arguments import ArgumentSchema
from flagline.domain.types.results import ParseResult
from flagline.logger import get_logger

logger = get_logger("command_registry")


class CommandInvocation(NamedTuple):
    """A command keyword together with the outcome of parsing its arguments."""

    keyword: str
    result: ParseResult


class CommandRegistry:
    """Known commands, their schemas and descriptions, in registration order."""

    def __init__(self, strict: bool = False):
        self._schemas: dict[str, ArgumentSchema] = {}
        self._descriptions: dict[str, str] = {}
        self.parser = FlagArgumentParser(strict=strict)

    @classmethod
    def from_config(cls, config: CommandsConfig, strict: bool = False) -> CommandRegistry:
        registry = cls(strict=strict)
        for keyword, command in config.commands.items():
            registry.register(keyword, command.to_schema(), command.description)
        return registry

    def register(self, keyword: str, schema: ArgumentSchema, description: str = "") -> None:
        """
        Register ``schema`` under ``keyword``.

        Raises:
            SchemaError: The keyword is empty, contains whitespace, or is taken
        """
        if keyword.split() != [keyword]:
            raise SchemaError(f"Invalid command keyword: '{keyword}'")
        if keyword in self._schemas:
            raise SchemaError(f"Command '{keyword}' is already registered")
        self._schemas[keyword] = schema
        self._descriptions[keyword] = description
        logger.debug(f"Registered command '{keyword}' with flags {list(schema.markers)}")

    def get(self, keyword: str) -> ArgumentSchema | None:
        return self._schemas.get(keyword)

    def describe(self, keyword: str) -> str:
        return self._descriptions.get(keyword, "")

    def keywords(self) -> list[str]:
        return list(self._schemas)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)

    def dispatch(self, line: str) -> CommandInvocation:
        """
        Split the keyword off ``line`` and parse the rest against its schema.

        Args:
            line: A full command line, e.g. ``take -l 1 -m``

        Returns:
            CommandInvocation with the keyword and its ParseResult

        Raises:
            UnknownCommandError: The keyword is empty or not registered
        """
        parts = line.strip().split(maxsplit=1)
        keyword = parts[0] if parts else ""
        schema = self._schemas.get(keyword)
        if schema is None:
            raise UnknownCommandError(keyword)

        raw = parts[1] if len(parts) > 1 else ""
        result = self.parser.run(schema, raw)
        if result.ok:
            logger.info(f"Command '{keyword}' parsed: {result.arguments.to_dict()}")
        elif result.is_help:
            logger.info(f"Help requested for command '{keyword}'")
        else:
            logger.warning(f"Command '{keyword}' rejected: {result.message}")
        return CommandInvocation(keyword, result)
