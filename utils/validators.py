"""
Input validation helper functions.
Parses and checks the raw text typed at the console.
"""

import re


def parse_int(text: str) -> int | None:
    """
    Parse a whole number typed by the user.

    Accepts an optional sign and surrounding whitespace only.

    Args:
        text: Raw input

    Returns:
        The integer, or None if the text is not a whole number
    """
    if text is None:
        return None

    cleaned = text.strip()
    if not re.match(r'^[+-]?[0-9]+$', cleaned):
        return None
    return int(cleaned)


def validate_number_range(number: int, min_value: int, max_value: int) -> bool:
    """
    Check a number lies in [min_value, max_value].

    Args:
        number: Value to check
        min_value: Lowest accepted value
        max_value: Highest accepted value

    Returns:
        True if in range
    """
    return min_value <= number <= max_value


def is_blank(text: str) -> bool:
    """True for None, empty text or text made only of whitespace."""
    return text is None or not text.strip()
