"""
Decoding of share values written as digit strings in bases 2 to 36.
"""

from typing import Union

from ..errors import InvalidDigit, UnsupportedBase

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
MIN_BASE = 2
MAX_BASE = len(DIGITS)

_DIGIT_VALUES = {c: v for v, c in enumerate(DIGITS)}


def check_base(base: int) -> int:
    """Return base unchanged if it is an int in [2, 36], else raise UnsupportedBase"""
    if isinstance(base, bool) or not isinstance(base, int):
        raise UnsupportedBase(f"Unsupported base {base!r}: base must be an integer")
    if not MIN_BASE <= base <= MAX_BASE:
        raise UnsupportedBase(f"Unsupported base {base}: base must lie between {MIN_BASE} and {MAX_BASE}")
    return base


def parse_base(raw: Union[int, str]) -> int:
    """
    Convert the base field of a share to an int.

    Share documents store bases either as numbers or as decimal strings ("16").

    Raises:
        UnsupportedBase: If raw is neither or lies outside [2, 36]
    """
    if isinstance(raw, str):
        if not (raw.strip().isascii() and raw.strip().isdecimal()):
            raise UnsupportedBase(f"Unsupported base {raw!r}: base must be an integer")
        raw = int(raw.strip())
    elif isinstance(raw, float) and raw.is_integer():
        raw = int(raw)
    return check_base(raw)


def decode(value: str, base: int) -> int:
    """
    Decode a digit string in the given base into an exact non-negative int.

    Digits are 0-9 followed by a-z (case-insensitive) for the values 10 to 35.
    Digits are accumulated left to right as result * base + digit, so strings
    of any length decode without loss.

    Example:
        decode("ff", 16) == 255

    Args:
        value (str):
            The digit string. Signs, whitespace and prefixes such as '0x' are
            not digits and are rejected.

        base (int):
            An integer between 2 and 36.

    Returns:
        (int):
            The value of the digit string.

    Raises:
        UnsupportedBase: If base is not an integer between 2 and 36
        InvalidDigit: If value is empty or contains a character that is no digit in base
    """
    check_base(base)
    if not isinstance(value, str):
        raise InvalidDigit(f"Value {value!r} is not a digit string")
    if not value:
        raise InvalidDigit(f"Empty value in base {base}")
    result = 0
    for ch in value:
        digit = _DIGIT_VALUES.get(ch.lower()) if ch.isascii() else None
        if digit is None or digit >= base:
            raise InvalidDigit(f"Invalid digit {ch!r} in {value!r} for base {base}")
        result = result * base + digit
    return result
