"""
Radix Codec
Positional digit strings in any base from 2 to 36.

Digits 0-9 carry their own value, letters a-z (either case) carry 10-35.
Values are exact Python integers, so 20+ digit strings in base 16 or
40-digit strings in base 3 decode without losing precision.

Signs, whitespace, underscores and 0x/0o/0b prefixes are not digits and
are rejected, unlike with the built-in int().
"""

from polyrecover.errors import MalformedDigit

MIN_BASE = 2
MAX_BASE = 36
DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _check_base(base: int) -> None:
    if isinstance(base, bool) or not isinstance(base, int):
        raise ValueError(f"Base must be an integer, got {base!r}")
    if not MIN_BASE <= base <= MAX_BASE:
        raise ValueError(f"Base must be between {MIN_BASE} and {MAX_BASE}, got {base}")


def digit_value(char: str) -> int:
    """
    Value of a single digit character, independent of any base.

    Returns -1 for characters that are not ASCII letters or digits.
    """
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "a" <= char <= "z":
        return 10 + ord(char) - ord("a")
    if "A" <= char <= "Z":
        return 10 + ord(char) - ord("A")
    return -1


def decode(digits: str, base: int) -> int:
    """
    Decode a digit string written in the given base.

    Args:
        digits: Non-empty string of digits, most significant first.
        base: The radix, 2 through 36.

    Returns:
        The exact non-negative integer value.

    Raises:
        ValueError: If the base is out of range or the string is empty.
        MalformedDigit: If a character is not a valid digit for the base.
    """
    _check_base(base)
    if not digits:
        raise ValueError("Cannot decode an empty digit string")

    value = 0
    for position, char in enumerate(digits):
        digit = digit_value(char)
        if digit < 0 or digit >= base:
            raise MalformedDigit(char, position, base)
        value = value * base + digit
    return value


def encode(value: int, base: int) -> str:
    """Encode a non-negative integer as a lower-case digit string."""
    _check_base(base)
    if value < 0:
        raise ValueError("Only non-negative integers can be encoded")
    if value == 0:
        return "0"

    chars = []
    while value:
        value, digit = divmod(value, base)
        chars.append(DIGITS[digit])
    return "".join(reversed(chars))
