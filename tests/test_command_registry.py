"""Tests for CommandRegistry."""

import pytest

from flagline.application.command_config import CommandsConfig
from flagline.application.command_registry import CommandRegistry
from flagline.domain.exceptions import SchemaError, UnknownCommandError
from flagline.domain.types.results import ParseStatus


class TestCommandRegistry:
    """Tests for registering and dispatching commands."""

    def test_register_and_get(self, modify_schema):
        """Test that a registered schema can be looked up by keyword."""
        registry = CommandRegistry()
        registry.register("modify", modify_schema, "Modify a medication")
        assert registry.get("modify") is modify_schema
        assert registry.describe("modify") == "Modify a medication"
        assert registry.keywords() == ["modify"]
        assert "modify" in registry
        assert len(registry) == 1

    def test_register_duplicate_keyword(self, modify_schema):
        """Test that a keyword can only be registered once."""
        registry = CommandRegistry()
        registry.register("modify", modify_schema)
        with pytest.raises(SchemaError):
            registry.register("modify", modify_schema)

    @pytest.mark.parametrize("keyword", ["", "  ", "two words"])
    def test_register_invalid_keyword(self, modify_schema, keyword):
        """Test that empty or spaced keywords are rejected."""
        with pytest.raises(SchemaError):
            CommandRegistry().register(keyword, modify_schema)

    def test_from_config(self, commands_data):
        """Test building a registry from a CommandsConfig."""
        registry = CommandRegistry.from_config(CommandsConfig.model_validate(commands_data))
        assert registry.keywords() == ["modify", "take"]
        assert registry.get("take").markers == ("-l", "-m")

    def test_dispatch_success(self, modify_schema):
        """Test dispatching a full command line."""
        registry = CommandRegistry()
        registry.register("modify", modify_schema)
        keyword, result = registry.dispatch("  modify -n Panadol Extra -l 1 ")
        assert keyword == "modify"
        assert result.ok
        assert result.arguments == {"name": "Panadol Extra", "list_index": "1"}

    def test_dispatch_keyword_only_is_help(self, modify_schema):
        """Test that a bare keyword yields help."""
        registry = CommandRegistry()
        registry.register("modify", modify_schema)
        assert registry.dispatch("modify").result.status is ParseStatus.HELP

    def test_dispatch_failures(self, modify_schema):
        """Test that failures are returned, not raised."""
        registry = CommandRegistry()
        registry.register("modify", modify_schema)
        assert registry.dispatch("modify -n a").result.status is ParseStatus.MISSING
        assert registry.dispatch("modify -l 1 -l 2").result.status is ParseStatus.DUPLICATE

    def test_dispatch_strict(self, take_schema):
        """Test that a strict registry rejects text after switches."""
        registry = CommandRegistry(strict=True)
        registry.register("take", take_schema)
        assert registry.dispatch("take -l 1 -m now").result.status is ParseStatus.UNEXPECTED_VALUE

    @pytest.mark.parametrize("line", ["", "unknown -l 1"])
    def test_dispatch_unknown(self, line):
        """Test that unknown keywords raise UnknownCommandError."""
        with pytest.raises(UnknownCommandError):
            CommandRegistry().dispatch(line)
