"""Render a magnitude back into text in its recognized base."""

from __future__ import annotations

from incdec.tokens import Base, NumberPattern

_FORMAT = {
    Base.BIN: "b",
    Base.OCT: "o",
    Base.DEC: "d",
    Base.HEX: "x",
}


def prefers_upper(digits: str) -> bool:
    """Return True if uppercase hex letters strictly outnumber lowercase ones."""
    lower = sum(1 for ch in digits if "a" <= ch <= "f")
    upper = sum(1 for ch in digits if "A" <= ch <= "F")
    return upper > lower


def render_digits(value: int, digits: str, base: Base, width: int) -> str:
    """Render *value* given the original *digits* it replaces.

    Decimals are zero-padded only when the original was; other bases always
    are. Padding never truncates.
    """
    spec = _FORMAT[base]
    if base is Base.HEX and prefers_upper(digits):
        spec = "X"

    if base is Base.DEC and not (digits.startswith("0") or digits.startswith("-0")):
        return format(value, spec)
    if width <= 0:
        return format(value, spec)
    return format(value, f"0{width}{spec}")


def render_number(value: int, digits: str, pattern: NumberPattern, width: int) -> str:
    """Render *value* with the pattern's prefix in front."""
    return pattern.prefix + render_digits(value, digits, pattern.base, width)
