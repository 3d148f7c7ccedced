"""Tests for logging setup."""

import importlib
import types

from loguru import logger

import flagline
from flagline.core.parsers.flag_parser import parse
from flagline.logger import setup_logger


def test_file_logging_records_parse_steps(tmp_path, modify_schema):
    log_file = tmp_path / "flagline.log"
    setup_logger(log_file=str(log_file), log_level="DEBUG")
    parse(modify_schema, "-n Panadol -l 1")
    logger.remove()

    content = log_file.read_text(encoding="utf-8")
    assert "Located flags" in content
    assert "Parsed argument 'name' = 'Panadol'" in content
    assert "| parsers:" in content


def test_import_disables_package_logging(tmp_path, modify_schema):
    logger.enable("flagline")
    importlib.reload(flagline)

    log_file = tmp_path / "other.log"
    logger.add(str(log_file), level="DEBUG")
    parse(modify_schema, "-l 1")
    logger.remove()

    assert log_file.read_text(encoding="utf-8") == ""


def test_package_import_keeps_logger_submodule():
    module = importlib.reload(flagline)

    assert isinstance(module.logger, types.ModuleType)
    assert module.logger is importlib.import_module("flagline.logger")
    assert callable(module.logger.setup_logger)
