"""Digit parsing and saturating arithmetic over 128-bit class magnitudes."""

from __future__ import annotations

from incdec.errors import DigitError
from incdec.tokens import SEPARATOR, Base, NumberPattern, is_digit

_MAX_DIGITS = 128


def split_digits(word: str, pattern: NumberPattern) -> str:
    """Return the digits of *word* after the recognized prefix."""
    return word[len(pattern.prefix) :]


def parse_magnitude(
    digits: str,
    pattern: NumberPattern,
    token: str,
    separator: str = SEPARATOR,
) -> int:
    """Parse *digits* in the pattern's base.

    Raises DigitError for characters outside the base, or for values that do
    not fit the pattern's 128-bit range. *token* and *separator* only serve
    the error's column.
    """
    base = pattern.base
    start = 0
    if pattern.signed and digits[:1] in ("+", "-"):
        start = 1

    if start == len(digits):
        raise DigitError(f"missing digits for base {int(base)}", token, len(token))

    for i in range(start, len(digits)):
        ch = digits[i]
        if not is_digit(ch, base):
            column = token_column(token, len(pattern.prefix) + i, separator)
            raise DigitError(f"invalid digit {ch!r} for base {int(base)}", token, column)

    # Leading zeros carry no value; anything longer than 128 binary digits
    # cannot fit and is not handed to int() at all.
    significant = digits[start:].lstrip("0") or "0"
    value = None
    if len(significant) <= _MAX_DIGITS:
        value = int(significant, int(base))
        if digits[:1] == "-":
            value = -value

    low, high = pattern.bounds
    if value is None or not low <= value <= high:
        column = token_column(token, len(pattern.prefix), separator)
        raise DigitError(f"number out of 128-bit range for base {int(base)}", token, column)
    return value


def token_column(token: str, index: int, separator: str = SEPARATOR) -> int:
    """Map an index into the separator-free word to a 1-based token column."""
    seen = 0
    for col, ch in enumerate(token, start=1):
        if ch == separator:
            continue
        if seen == index:
            return col
        seen += 1
    return len(token)


def saturating_add(value: int, amount: int, pattern: NumberPattern) -> int:
    """Add *amount* to *value*, clamping to the pattern's representable range."""
    low, high = pattern.bounds
    return max(low, min(high, value + amount))


def target_width(digits: str, value: int, new_value: int, base: Base, separators: int) -> int:
    """Digit count the rendered number is padded to.

    Decimal widths track a sign appearing or disappearing. Other bases keep
    the original digit count and only ever grow by carry.
    """
    if base is not Base.DEC:
        return len(digits)

    width = len(digits)
    if value < 0 <= new_value:
        width -= 1
    elif new_value < 0 <= value:
        width += 1
    return width - separators
