"""Increment pipeline: strip, recognize, add, render, regroup."""

from __future__ import annotations

from dataclasses import dataclass

from incdec.magnitude import parse_magnitude, saturating_add, split_digits, target_width
from incdec.patterns import recognize
from incdec.render import render_number
from incdec.separators import boundary_anchor, redistribute, strip_separators
from incdec.tokens import SEPARATOR, NumberPattern, check_separator


@dataclass(frozen=True, slots=True)
class Outcome:
    """Every intermediate stage of one increment, ending in the new text."""

    token: str
    amount: int
    word: str
    positions: tuple[int, ...]
    pattern: NumberPattern
    digits: str
    value: int
    new_value: int
    width: int
    rendered: str
    text: str


def evaluate(selected_text: str, amount: int, separator: str = SEPARATOR) -> Outcome:
    """Increment *selected_text* by *amount*, raising IncrementError on rejection."""
    check_separator(separator)

    word, positions = strip_separators(selected_text, separator)
    pattern = recognize(word)
    digits = split_digits(word, pattern)
    value = parse_magnitude(digits, pattern, selected_text, separator)

    new_value = saturating_add(value, amount, pattern)
    width = target_width(digits, value, new_value, pattern.base, len(positions))
    rendered = render_number(new_value, digits, pattern, width)

    sign = 1 if pattern.signed and digits[:1] in ("+", "-") else 0
    anchor = boundary_anchor(selected_text, len(pattern.prefix) + sign, separator)

    boundary = len(pattern.prefix) + (1 if new_value < 0 else 0)
    text = redistribute(rendered, positions, len(selected_text), boundary, separator, anchor)

    return Outcome(
        token=selected_text,
        amount=amount,
        word=word,
        positions=positions,
        pattern=pattern,
        digits=digits,
        value=value,
        new_value=new_value,
        width=width,
        rendered=rendered,
        text=text,
    )
