MIN_CODE = 32
MAX_CODE = 126

ASCII_PRINTABLE = "".join(chr(i) for i in range(MIN_CODE, MAX_CODE + 1))

DIGITS = "0123456789"

DEFAULT_CHARSET = DIGITS


def is_printable(char: str) -> bool:
    return len(char) == 1 and MIN_CODE <= ord(char) <= MAX_CODE


def char_range(first: str, last: str) -> str:
    """Inclusive range of characters between two endpoints, in either order."""
    lo, hi = sorted((ord(first), ord(last)))
    return "".join(chr(i) for i in range(lo, hi + 1))
