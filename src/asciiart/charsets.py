# Printable ASCII: space (32) through tilde (126)
ASCII_PRINTABLE = "".join(chr(i) for i in range(32, 127))

DIGITS = "0123456789"


def is_printable(char: str) -> bool:
    return len(char) == 1 and char in ASCII_PRINTABLE


def char_range(first: str, last: str) -> str:
    """Inclusive range of characters between two endpoints, in either order."""
    lo, hi = sorted((ord(first), ord(last)))
    return "".join(chr(i) for i in range(lo, hi + 1))
