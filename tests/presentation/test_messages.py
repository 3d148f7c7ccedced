from flagline.core.parsers.flag_parser import parse_command
from flagline.presentation.messages import (
    format_error_message,
    format_result_text,
)


def test_error_prefix():
    assert format_error_message("Invalid index specified") == "ERROR: Invalid index specified"


def test_result_text_success(modify_schema):
    text = format_result_text("modify", parse_command(modify_schema, "-l 1 -n Panadol"))
    assert text.plain == 'SUCCESS: modify {"list_index": "1", "name": "Panadol"}'


def test_result_text_error(modify_schema):
    text = format_result_text("modify", parse_command(modify_schema, "-n Panadol"))
    assert text.plain == 'ERROR: Missing "-l" argument'


def test_result_text_help(modify_schema):
    text = format_result_text("modify", parse_command(modify_schema, ""))
    assert text.plain.startswith("HELP:")
    assert "modify" in text.plain
