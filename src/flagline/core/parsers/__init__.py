"""Flag parsing stages: tokenize, locate, extract, validate."""

from flagline.core.parsers.extractor import extract_values, ordered_occurrences
from flagline.core.parsers.flag_parser import FlagArgumentParser, parse, parse_command
from flagline.core.parsers.locator import find_marker, locate
from flagline.core.parsers.tokenizer import tokenize
from flagline.core.parsers.validator import check_required

__all__ = [
    "FlagArgumentParser",
    "parse",
    "parse_command",
    "tokenize",
    "find_marker",
    "locate",
    "extract_values",
    "ordered_occurrences",
    "check_required",
]
