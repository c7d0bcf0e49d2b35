"""Increment and decrement integer literals in place."""

from __future__ import annotations

from incdec.engine import Outcome, evaluate
from incdec.errors import IncrementError
from incdec.tokens import SEPARATOR

__version__ = "0.1.0"

__all__ = ["Outcome", "evaluate", "increment", "IncrementError", "__version__"]


def increment(selected_text: str, amount: int, separator: str = SEPARATOR) -> str | None:
    """Return *selected_text* with *amount* added, or None if it is not a number."""
    try:
        return evaluate(selected_text, amount, separator).text
    except IncrementError:
        return None
