"""--debug dump of increment pipeline stages to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from incdec.engine import Outcome


def dump_outcome(outcome: Outcome, *, file: TextIO | None = None) -> None:
    """Print a human-readable trace of *outcome* to *file* (default: stderr)."""
    if file is None:
        file = sys.stderr
    pattern = outcome.pattern
    file.write(f"Token {outcome.token!r} {outcome.amount:+d}\n")
    file.write(f"  Stripped {outcome.word!r} separators={list(outcome.positions)}\n")
    file.write(f"  Pattern base={int(pattern.base)} prefix={pattern.prefix!r}\n")
    file.write(f"  Digits {outcome.digits!r}\n")
    file.write(f"  Value {outcome.value} -> {outcome.new_value}\n")
    file.write(f"  Rendered {outcome.rendered!r} width={outcome.width}\n")
    file.write(f"  Result {outcome.text!r}\n")
