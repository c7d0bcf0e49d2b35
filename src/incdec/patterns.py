"""Base recognition from a number's leading prefix."""

from __future__ import annotations

import re
from dataclasses import dataclass

from incdec.tokens import Base, NumberPattern


@dataclass(frozen=True, slots=True)
class Matcher:
    """One base's prefix grammar, anchored at the start of the word."""

    base: Base
    regex: re.Pattern[str]

    def match(self, word: str) -> NumberPattern | None:
        m = self.regex.match(word)
        if m is None:
            return None
        return NumberPattern(self.base, m.group())


# Priority order matters: the first matcher to fire wins.
MATCHERS: tuple[Matcher, ...] = (
    Matcher(Base.HEX, re.compile(r"0x|[0-9]*'h")),
    Matcher(Base.DEC, re.compile(r"[0-9]*'d")),
    Matcher(Base.OCT, re.compile(r"0o")),
    Matcher(Base.BIN, re.compile(r"0b|[0-9]*'b")),
)

DEFAULT_PATTERN = NumberPattern(Base.DEC, "")


def recognize(word: str) -> NumberPattern:
    """Return the base and prefix of a separator-free number."""
    for matcher in MATCHERS:
        pattern = matcher.match(word)
        if pattern is not None:
            return pattern
    return DEFAULT_PATTERN
