"""CLI argument parsing and application startup."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

from .definition import load_definition
from .errors import ConfigError, StartupValidationError
from .formatter import format_outcome, outcome_to_json
from .models import ErrorOutcome
from .parser import parse_line
from .repl import run_repl

_DEBUG_ENV = "OPTLINE_DEBUG"

_USAGE = """\
Usage: optline --definition <path> [--line <text>] [--json] [--debug]

Options:
  --definition <path>  Path to a JSON parser definition (required).
  --line <text>        Parse one line and exit. Without it, an
                       interactive prompt reads lines until exit/quit.
  --json               Print outcomes as JSON.
  --debug              Log debug output to stderr (also OPTLINE_DEBUG=1).
  --help, -h           Show this help message and exit.

Examples:
  optline --definition greet.json --line '--name "Ann Lee" -v'
  optline --definition greet.json --json
"""


@dataclass
class AppArgs:
    definition_path: Path
    line: str | None = None
    as_json: bool = False
    debug: bool = False


def parse_args(argv: list[str] | None = None) -> AppArgs | None:
    """Parse CLI arguments. Returns None if --help was requested."""
    args = argv if argv is not None else sys.argv[1:]

    definition_raw: str | None = None
    line: str | None = None
    as_json = False
    debug = False

    i = 0
    while i < len(args):
        if args[i] in ("--help", "-h"):
            print(_USAGE, end="")
            return None
        if args[i] == "--definition":
            if i + 1 >= len(args):
                raise StartupValidationError("--definition requires a path argument.")
            definition_raw = args[i + 1]
            i += 2
        elif args[i] == "--line":
            if i + 1 >= len(args):
                raise StartupValidationError("--line requires a text argument.")
            line = args[i + 1]
            i += 2
        elif args[i] == "--json":
            as_json = True
            i += 1
        elif args[i] == "--debug":
            debug = True
            i += 1
        else:
            raise StartupValidationError(f"Unknown argument: {args[i]}")

    if definition_raw is None:
        raise StartupValidationError("--definition is required.")

    return AppArgs(
        definition_path=Path(definition_raw).expanduser(),
        line=line,
        as_json=as_json,
        debug=debug or bool(os.getenv(_DEBUG_ENV)),
    )


def setup_logging(debug: bool) -> None:
    """Send library logs to stderr; only warnings unless debug is on."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> None:
    """Application entry point."""
    try:
        app_args = parse_args(argv)
    except StartupValidationError as exc:
        _die(str(exc))
    if app_args is None:
        sys.exit(0)

    setup_logging(app_args.debug)

    try:
        config = load_definition(app_args.definition_path)
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)

    if app_args.line is not None:
        outcome = parse_line(config, app_args.line)
        print(outcome_to_json(outcome) if app_args.as_json else format_outcome(outcome))
        sys.exit(1 if isinstance(outcome, ErrorOutcome) else 0)

    try:
        run_repl(config, as_json=app_args.as_json)
    except KeyboardInterrupt:
        print()
        print("Interrupted.")
    except Exception as exc:  # noqa: BLE001
        print(f"ERROR: Unexpected: {exc}", file=sys.stderr)
        sys.exit(1)


def _die(message: str) -> NoReturn:
    print(f"ERROR: {message}", file=sys.stderr)
    print("Run 'optline --help' for usage.", file=sys.stderr)
    sys.exit(1)
