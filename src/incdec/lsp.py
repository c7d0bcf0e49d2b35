"""Minimal LSP server for incdec — increment/decrement code actions."""

from __future__ import annotations

import re

from lsprotocol.types import (
    TEXT_DOCUMENT_CODE_ACTION,
    CodeAction,
    CodeActionKind,
    CodeActionOptions,
    CodeActionParams,
    Position,
    Range,
    TextDocumentSyncKind,
    TextEdit,
    WorkspaceEdit,
)
from pygls.lsp.server import LanguageServer

from incdec import __version__, increment

server = LanguageServer("incdec-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)

# A number-ish run: digits, letters for prefixes and hex, quotes for widths, separators
_WORD = re.compile(r"-?[0-9A-Za-z'_]+")

_ACTIONS = (("Increment number", 1), ("Decrement number", -1))


def number_span(line: str, character: int) -> tuple[int, int] | None:
    """Return the [start, end) columns of the number-like run at *character*."""
    touching = None
    for m in _WORD.finditer(line):
        if m.start() <= character < m.end():
            return m.start(), m.end()
        if m.end() == character:
            touching = (m.start(), m.end())
    return touching


def _target(lines: list[str], rng: Range) -> tuple[Range, str] | None:
    """Pick the text to increment: the selection, or the number under the cursor."""
    if rng.start.line >= len(lines):
        return None
    line = lines[rng.start.line].rstrip("\r\n")

    if rng.start != rng.end:
        if rng.start.line != rng.end.line:
            return None
        return rng, line[rng.start.character : rng.end.character]

    span = number_span(line, rng.start.character)
    if span is None:
        return None
    start, end = span
    word_range = Range(
        start=Position(line=rng.start.line, character=start),
        end=Position(line=rng.start.line, character=end),
    )
    return word_range, line[start:end]


def _code_actions(ls: LanguageServer, params: CodeActionParams) -> list[CodeAction]:
    """Build increment/decrement actions for the requested range."""
    uri = params.text_document.uri
    doc = ls.workspace.get_text_document(uri)

    target = _target(doc.lines, params.range)
    if target is None:
        return []
    rng, text = target

    actions: list[CodeAction] = []
    for title, amount in _ACTIONS:
        new_text = increment(text, amount)
        if new_text is None:
            # Not a number: nothing to offer
            return []
        actions.append(
            CodeAction(
                title=title,
                kind=CodeActionKind.RefactorRewrite,
                edit=WorkspaceEdit(changes={uri: [TextEdit(range=rng, new_text=new_text)]}),
            )
        )
    return actions


@server.feature(
    TEXT_DOCUMENT_CODE_ACTION,
    CodeActionOptions(code_action_kinds=[CodeActionKind.RefactorRewrite]),
)
def code_action(ls: LanguageServer, params: CodeActionParams) -> list[CodeAction]:
    """Offer increment/decrement rewrites for the number at the cursor."""
    return _code_actions(ls, params)


def main() -> None:
    server.start_io()
