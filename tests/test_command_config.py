"""Tests for loading command configuration files."""

import json

import pytest
from pydantic import ValidationError

from flagline.application.command_config import (
    ArgumentConfig,
    CommandConfig,
    CommandsConfig,
    load_commands_config,
)
from flagline.domain.exceptions import SchemaError


def test_load_valid(commands_file):
    config = load_commands_config(commands_file)
    assert list(config.commands) == ["modify", "take"]
    assert config.commands["take"].description == "Mark a medication as taken"


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_commands_config(tmp_path / "nope.json")


def test_load_invalid_json(tmp_path):
    path = tmp_path / "commands.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        load_commands_config(path)


def test_load_invalid_structure(tmp_path):
    path = tmp_path / "commands.json"
    path.write_text(json.dumps({"commands": {"take": {"arguments": [{"name": "x"}]}}}), encoding="utf-8")
    with pytest.raises(ValidationError):
        load_commands_config(path)


def test_to_schema(commands_file):
    schema = load_commands_config(commands_file).commands["take"].to_schema()
    assert schema.markers == ("-l", "-m")
    morning = schema.get("morning")
    assert morning.takes_value is False
    assert morning.optional is True
    assert morning.help_text == "Morning dose"


def test_to_schema_rejects_duplicate_flags():
    command = CommandConfig(
        arguments=[
            ArgumentConfig(name="name", flag="-n"),
            ArgumentConfig(name="note", flag="-n"),
        ]
    )
    with pytest.raises(SchemaError):
        command.to_schema()


def test_argument_config_is_frozen():
    argument = ArgumentConfig(name="name", flag="-n")
    with pytest.raises(ValidationError):
        argument.flag = "-x"


def test_empty_config():
    assert CommandsConfig().commands == {}
