"""Command-line interface for incdec."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from incdec.errors import IncrementError
from incdec.tokens import SEPARATOR, check_separator

CONFIG_NAME = "incdec.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    tokens: list[str]
    amount: int
    separator: str
    strict: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="incdec",
        description="Increment or decrement integer literals",
    )
    p.add_argument("tokens", nargs="+", metavar="TOKEN", help="Number literal to change")
    p.add_argument(
        "-a",
        "--amount",
        type=int,
        default=None,
        metavar="N",
        help="Amount to add (default: 1)",
    )
    p.add_argument("--decrement", action="store_true", help="Subtract the amount instead")
    p.add_argument(
        "--separator",
        default=None,
        metavar="CHAR",
        help=f"Digit group separator (default: {SEPARATOR})",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help="Report tokens that are not numbers and exit 1",
    )
    p.add_argument("--debug", action="store_true", help="Dump pipeline stages to stderr")
    return p


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else search_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace, search_dir: Path | None = None) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, search_dir if search_dir is not None else Path("."))

    section = config.get("increment")
    if not isinstance(section, dict):
        section = {}

    # Amount: default < config < CLI
    amount = 1
    cfg_amount = section.get("amount")
    if cfg_amount is not None:
        if not isinstance(cfg_amount, int) or isinstance(cfg_amount, bool):
            raise argparse.ArgumentTypeError(f"invalid amount in config: {cfg_amount!r}")
        amount = cfg_amount
    if args.amount is not None:
        amount = args.amount
    if args.decrement:
        amount = -amount

    # Separator: default < config < CLI
    separator = SEPARATOR
    cfg_separator = section.get("separator")
    if cfg_separator is not None:
        separator = str(cfg_separator)
    if args.separator is not None:
        separator = args.separator
    try:
        check_separator(separator)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc

    return CliOptions(
        tokens=list(args.tokens),
        amount=amount,
        separator=separator,
        strict=args.strict,
        debug=args.debug,
    )


def run(options: CliOptions) -> int:
    """Increment every token, writing one result per line to stdout."""
    from incdec.debug import dump_outcome
    from incdec.engine import evaluate

    status = 0
    for token in options.tokens:
        try:
            outcome = evaluate(token, options.amount, options.separator)
        except IncrementError as exc:
            if options.strict:
                print(str(exc), file=sys.stderr)
                status = 1
            sys.stdout.write(token + "\n")
            continue
        if options.debug:
            dump_outcome(outcome, file=sys.stderr)
        sys.stdout.write(outcome.text + "\n")
    return status


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except tomllib.TOMLDecodeError as exc:
        print(f"error: invalid config: {exc}", file=sys.stderr)
        return 2

    return run(options)
