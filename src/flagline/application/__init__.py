"""Application layer - command configuration and dispatch."""

from flagline.application.command_config import (
    ArgumentConfig,
    CommandConfig,
    CommandsConfig,
    load_commands_config,
)
from flagline.application.command_registry import CommandInvocation, CommandRegistry

__all__ = [
    "ArgumentConfig",
    "CommandConfig",
    "CommandsConfig",
    "load_commands_config",
    "CommandInvocation",
    "CommandRegistry",
]
