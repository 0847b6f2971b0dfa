"""Interactive loop that parses lines against a loaded definition."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .formatter import format_outcome, outcome_to_json
from .models import ParserConfig
from .parser import parse_line

logger = logging.getLogger(__name__)

_PROMPT = "> "
_EXIT_COMMANDS = frozenset(("exit", "quit"))


def run_repl(
    config: ParserConfig,
    *,
    as_json: bool = False,
    read_line: Callable[[str], str] = input,
) -> None:
    """Run the REPL loop until exit/quit or EOF."""
    render = outcome_to_json if as_json else format_outcome

    print(f"Parsing options for {config.program_name}. Type 'exit' or 'quit' to exit, or Ctrl-D")

    while True:
        try:
            line = read_line(_PROMPT)
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        stripped = line.strip()
        if not stripped:
            continue
        if stripped in _EXIT_COMMANDS:
            break

        outcome = parse_line(config, line)
        logger.debug("repl line produced %s", type(outcome).__name__)
        text = render(outcome)
        if text:
            print(text)
