"""Digit-group separator removal and re-insertion."""

from __future__ import annotations

from incdec.errors import EmptyTokenError, SeparatorError
from incdec.tokens import SEPARATOR


def strip_separators(token: str, separator: str = SEPARATOR) -> tuple[str, tuple[int, ...]]:
    """Remove separators from *token*.

    Returns the separator-free word and the offsets of each separator counted
    from the right end of the token (0 is the last character), ascending.
    """
    if not token:
        raise EmptyTokenError()
    if token.startswith(separator):
        raise SeparatorError("number cannot start with a separator", token, 1)
    if token.endswith(separator):
        raise SeparatorError("number cannot end with a separator", token, len(token))

    positions = tuple(i for i, ch in enumerate(reversed(token)) if ch == separator)
    word = token.replace(separator, "")
    return word, positions


def redistribute(
    text: str,
    positions: tuple[int, ...],
    original_length: int,
    boundary: int,
    separator: str = SEPARATOR,
    anchor: int | None = None,
) -> str:
    """Put separators back into a rendered number.

    *boundary* is the length of the leading prefix and sign. Offsets that no
    longer fit, or land inside the prefix, are dropped. A separator lands
    directly on the boundary only when its offset is *anchor*, the one that
    sat right after the prefix in the original token. When the number grew
    past *original_length*, the grouping of the two leftmost separators is
    repeated toward the prefix.
    """
    for rtl in positions:
        if rtl < len(text):
            index = len(text) - rtl
            if index > boundary or (index == boundary and rtl == anchor):
                text = text[:index] + separator + text[index:]

    if len(text) <= original_length or not positions:
        return text

    if len(positions) >= 2:
        spacing = positions[-1] - positions[-2] - 1
    else:
        spacing = positions[0]

    index = text.find(separator)
    if index == -1 or spacing <= 0:
        return text

    while index - boundary > spacing:
        index -= spacing
        text = text[:index] + separator + text[index:]
    return text


def boundary_anchor(token: str, boundary: int, separator: str = SEPARATOR) -> int | None:
    """Offset from the right of a separator that directly follows the first
    *boundary* non-separator characters of *token*, or None."""
    seen = 0
    for i, ch in enumerate(token):
        if seen == boundary:
            return len(token) - 1 - i if ch == separator else None
        if ch != separator:
            seen += 1
    return None
