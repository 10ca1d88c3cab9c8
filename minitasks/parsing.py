"""Strict parsing of console input."""


def parse_int(text: str) -> int:
    """Parse a non-negative integer made only of ASCII digits.

    Raises ValueError for empty input or any non-digit character.
    """
    if text and text.isascii() and text.isdigit():
        return int(text)
    raise ValueError(f"{text}:  Is not a valid int")


def parse_char(text: str) -> str:
    """Return the single ASCII letter that makes up ``text``.

    Raises ValueError when the input is not exactly one letter.
    """
    if len(text) == 1 and text.isascii() and text.isalpha():
        return text
    raise ValueError(f"{text}:  Is not a valid char")