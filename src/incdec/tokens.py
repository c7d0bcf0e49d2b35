"""Number bases, recognized patterns, and digit classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

SEPARATOR = "_"

# 128-bit class bounds
I128_MIN = -(2**127)
I128_MAX = 2**127 - 1
U128_MAX = 2**128 - 1


class Base(IntEnum):
    """Supported radixes; each member's value is its radix."""

    BIN = 2
    OCT = 8
    DEC = 10
    HEX = 16


@dataclass(frozen=True, slots=True)
class NumberPattern:
    """Base of a token and the literal prefix that selected it."""

    base: Base
    prefix: str

    @property
    def signed(self) -> bool:
        """Only bare decimals may go negative; hardware literals never do."""
        return self.base is Base.DEC and not self.prefix

    @property
    def bounds(self) -> tuple[int, int]:
        if self.signed:
            return I128_MIN, I128_MAX
        return 0, U128_MAX


_DIGITS = {
    Base.BIN: frozenset("01"),
    Base.OCT: frozenset("01234567"),
    Base.DEC: frozenset("0123456789"),
    Base.HEX: frozenset("0123456789abcdefABCDEF"),
}

# Characters a separator may never be: they belong to digits, prefixes or signs
_RESERVED = frozenset("'+-")


def is_digit(ch: str, base: Base) -> bool:
    """Return True if ch is a valid digit in the given base."""
    return ch in _DIGITS[base]


def check_separator(separator: str) -> str:
    """Validate a grouping separator, returning it unchanged."""
    if len(separator) != 1:
        raise ValueError(f"separator must be a single character, got {separator!r}")
    if separator.isalnum() or separator in _RESERVED:
        raise ValueError(f"separator {separator!r} clashes with number syntax")
    return separator
