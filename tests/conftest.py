"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from incdec import increment


@pytest.fixture
def check():
    """Return a helper asserting a table of (original, amount, expected) cases."""

    def _check(cases: list[tuple[str, int, str]]) -> None:
        for original, amount, expected in cases:
            result = increment(original, amount)
            assert result == expected, f"{original!r} {amount:+d}: expected {expected!r}, got {result!r}"

    return _check
