"""Command configuration parser.

Parses JSON files declaring commands and the flags each command accepts:

    {
      "commands": {
        "take": {
          "description": "Mark a medication as taken",
          "arguments": [
            {"name": "list_index", "flag": "-l", "prompt": "INDEX", "help": "Index of the medication"},
            {"name": "morning", "flag": "-m", "help": "Morning dose", "takes_value": false, "optional": true}
          ]
        }
      }
    }
"""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from flagline.domain.types.arguments import ArgumentSchema, ArgumentSpec
from flagline.logger import get_logger

logger = get_logger("command_config")


class ArgumentConfig(BaseModel):
    """Configuration for a single flag."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Logical name of the argument")
    flag: str = Field(..., min_length=1, description="Marker token, e.g. -n")
    prompt: str = Field("", description="Value prompt shown in help")
    help: str = Field("", description="Description shown in help")
    takes_value: bool = Field(True, description="False for presence-only switches")
    optional: bool = Field(False, description="Whether the flag may be omitted")

    def to_spec(self) -> ArgumentSpec:
        return ArgumentSpec(
            name=self.name,
            marker=self.flag,
            value_prompt=self.prompt,
            help_text=self.help,
            takes_value=self.takes_value,
            optional=self.optional,
        )


class CommandConfig(BaseModel):
    """Configuration for one command and its flags."""

    model_config = ConfigDict(frozen=True)

    description: str = Field("", description="One-line summary of the command")
    arguments: list[ArgumentConfig] = Field(default_factory=list, description="Flags in help order")

    def to_schema(self) -> ArgumentSchema:
        """
        Build the command's ArgumentSchema.

        Raises:
            SchemaError: Two arguments share a flag or a name
        """
        return ArgumentSchema.from_specs(argument.to_spec() for argument in self.arguments)


class CommandsConfig(BaseModel):
    """Configuration containing every command."""

    model_config = ConfigDict(frozen=True)

    commands: dict[str, CommandConfig] = Field(
        default_factory=dict, description="Command keyword to command configuration"
    )


def load_commands_config(config_path: str | Path) -> CommandsConfig:
    """
    Load command definitions from a JSON file.

    Args:
        config_path: Path to the JSON configuration file

    Returns:
        CommandsConfig: Parsed configuration object

    Raises:
        FileNotFoundError: If the configuration file doesn't exist
        json.JSONDecodeError: If the JSON file is invalid
        ValidationError: If the configuration structure is invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        error_msg = f"Command configuration file not found: {config_path}"
        logger.error(error_msg)
        raise FileNotFoundError(error_msg)

    logger.info(f"Loading command configuration from: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in configuration file {config_path}: {e}")
        raise

    try:
        config = CommandsConfig.model_validate(data)
    except ValidationError as e:
        logger.error(f"Invalid configuration structure in {config_path}: {e}")
        raise

    logger.info(f"Loaded {len(config.commands)} command(s)")
    for keyword, command in config.commands.items():
        logger.debug(f"  - {keyword}: {[argument.flag for argument in command.arguments]}")
    return config
