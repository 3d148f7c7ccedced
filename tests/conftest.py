"""Shared fixtures for flagline tests."""

import json

import pytest
from loguru import logger

from flagline.domain.types.arguments import ArgumentSchema, ArgumentSpec


@pytest.fixture
def modify_schema() -> ArgumentSchema:
    """Required list index and optional name, both taking values."""
    return ArgumentSchema(
        ArgumentSpec("list_index", "-l", "Which medication in the list?", "Index of the medication"),
        ArgumentSpec("name", "-n", "What is the name of the medication?", "Name of medication", optional=True),
    )


@pytest.fixture
def take_schema() -> ArgumentSchema:
    """Required list index followed by three presence-only period switches."""
    return ArgumentSchema(
        ArgumentSpec("list_index", "-l", "Which medication in the list?", "Index of the medication"),
        ArgumentSpec("morning", "-m", "", "Morning dose", takes_value=False, optional=True),
        ArgumentSpec("afternoon", "-a", "", "Afternoon dose", takes_value=False, optional=True),
        ArgumentSpec("evening", "-e", "", "Evening dose", takes_value=False, optional=True),
    )


@pytest.fixture
def commands_data() -> dict:
    return {
        "commands": {
            "modify": {
                "description": "Modify a medication",
                "arguments": [
                    {"name": "list_index", "flag": "-l", "prompt": "Which medication?", "help": "Index of the medication"},
                    {"name": "name", "flag": "-n", "prompt": "New name?", "help": "Name of medication", "optional": True},
                ],
            },
            "take": {
                "description": "Mark a medication as taken",
                "arguments": [
                    {"name": "list_index", "flag": "-l", "help": "Index of the medication"},
                    {"name": "morning", "flag": "-m", "help": "Morning dose", "takes_value": False, "optional": True},
                ],
            },
        }
    }


@pytest.fixture
def commands_file(tmp_path, commands_data):
    path = tmp_path / "commands.json"
    path.write_text(json.dumps(commands_data), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any logging setup done by a test (the CLI callback configures loguru)."""
    yield
    logger.remove()
    logger.disable("flagline")
