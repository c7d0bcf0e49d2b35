"""Rejection types with formatted token context."""

from __future__ import annotations


class IncrementError(Exception):
    """Raised when a token cannot be incremented, with the offending column."""

    def __init__(self, message: str, token: str, column: int = 1) -> None:
        self.message = message
        self.token = token
        self.column = column
        super().__init__(self.format())

    def format(self) -> str:
        # Caret stays within the token, at least one char wide
        col = max(1, min(self.column, len(self.token) or 1))
        pad = " " * (col - 1)

        return f"error: {self.message}\n  |\n  | {self.token}\n  | {pad}^"


class EmptyTokenError(IncrementError):
    """The selection is empty."""

    def __init__(self) -> None:
        super().__init__("empty token", "")


class SeparatorError(IncrementError):
    """The token starts or ends with the grouping separator."""


class DigitError(IncrementError):
    """The digits are invalid for the recognized base, or out of range."""
