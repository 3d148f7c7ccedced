"""Whitespace tokenizer for raw command input."""


def tokenize(raw: str) -> list[str]:
    """
    Split raw input on runs of whitespace.

    No quoting or escaping is recognized. Leading and trailing whitespace is
    discarded, so the result never contains empty tokens.

    Examples:
        '-n Panadol  Extra -l 2' -> ['-n', 'Panadol', 'Extra', '-l', '2']
        '   ' -> []

    Args:
        raw: Text typed after the command keyword

    Returns:
        List of tokens in input order
    """
    return raw.split()
