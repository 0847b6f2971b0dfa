"""Option matching and validation for a single input line."""

from __future__ import annotations

import logging

from .errors import (
    HELP_MISUSE,
    HELP_MISUSE_UP_TOP,
    INVALID_HELP_TARGET,
    ArgumentError,
    ConfigError,
)
from .help import render_global_help, render_option_help
from .models import (
    HELP_KEY,
    HELP_TOKENS,
    PRESENT,
    ErrorOutcome,
    HelpOutcome,
    OptionSpec,
    ParseOutcome,
    ParserConfig,
    ValuesOutcome,
)
from .options import find_option
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


def parse_line(config: ParserConfig, line: str) -> ParseOutcome:
    """Parse *line* against *config* and return exactly one outcome.

    Help requests are resolved before any other token is classified.
    Malformed input never raises; it produces an ErrorOutcome.
    """
    tokens = tokenize(line)
    logger.debug("parsing %d token(s) for %s", len(tokens), config.program_name)

    try:
        if any(token in HELP_TOKENS for token in tokens):
            outcome: ParseOutcome = _resolve_help(config, tokens)
        else:
            outcome = ValuesOutcome(_match_tokens(config, tokens))
    except ArgumentError as exc:
        outcome = ErrorOutcome(exc.message)

    logger.debug("outcome for %s: %s", config.program_name, type(outcome).__name__)
    return outcome


def _resolve_help(config: ParserConfig, tokens: list[str]) -> HelpOutcome:
    if len(tokens) == 1:
        return HelpOutcome(render_global_help(config))
    if len(tokens) == 2:
        target = tokens[1] if tokens[0] in HELP_TOKENS else tokens[0]
        option = find_option(config.options, target)
        if option is None:
            raise ArgumentError(INVALID_HELP_TARGET.format(token=target))
        return HelpOutcome(render_option_help(option))
    raise ArgumentError(HELP_MISUSE_UP_TOP)


def _match_tokens(config: ParserConfig, tokens: list[str]) -> dict[str, str]:
    result: dict[str, str] = {}

    i = 0
    while i < len(tokens):
        token = tokens[i]

        if token in HELP_TOKENS:
            result[HELP_KEY] = PRESENT
        elif token.startswith("--"):
            key, _, value = token[2:].partition("=")
            option = find_option(config.options, key)
            i += _record(result, option, value, token, tokens, i)
        elif token.startswith("-"):
            option, value = _split_short(config, token)
            i += _record(result, option, value, token, tokens, i)
        else:
            option = find_option(config.options, _strip_dashes(token))
            if option is None:
                raise ArgumentError.invalid(token)
            result[option.long_name] = PRESENT

        i += 1

    if HELP_KEY in result:
        raise ArgumentError(HELP_MISUSE)
    return result


def _split_short(config: ParserConfig, token: str) -> tuple[OptionSpec | None, str]:
    """Resolve `-x` / `-x=value` to the owning option and its inline value."""
    if len(token) < 2:
        raise ArgumentError.invalid(token)
    head, _, value = token.partition("=")
    # no grouping: anything between the letter and '=' is malformed
    if len(head) != 2:
        raise ArgumentError.invalid(token)
    return find_option(config.options, head[1]), value


def _record(
    result: dict[str, str],
    option: OptionSpec | None,
    value: str,
    token: str,
    tokens: list[str],
    index: int,
) -> int:
    """Store one option into *result*; return how many extra tokens were consumed."""
    if option is None:
        raise ArgumentError.invalid(token)

    # `--key=value` only checks that the key exists, not takes_value
    if value:
        result[option.long_name] = value
        return 0

    if not option.takes_value:
        result[option.long_name] = PRESENT
        return 0

    if index + 1 >= len(tokens) or tokens[index + 1].startswith("-"):
        raise ArgumentError.invalid(token)
    result[option.long_name] = tokens[index + 1]
    return 1


def _strip_dashes(token: str) -> str:
    if token.startswith("--"):
        return token[2:]
    if token.startswith("-"):
        return token[1:]
    return token


class Parser:
    """Builder that collects option definitions and parses input lines.

    The parser holds only configuration; each `parse` call is independent.

    Example:
        parser = Parser("greet", "Greets a person", "greet --name=Ann")
        parser.add_option("name", True, "n", "Who to greet")
        parser.parse("--name Ann")  # ValuesOutcome({"name": "Ann"})
    """

    def __init__(self, program_name: str, description: str = "", examples: str = "") -> None:
        self._config = ParserConfig(
            program_name=program_name,
            description=description,
            examples=examples,
        )

    @classmethod
    def from_config(cls, config: ParserConfig) -> Parser:
        parser = cls(config.program_name, config.description, config.examples)
        for option in config.options:
            parser.add_option(option.long_name, option.takes_value, option.short_name, option.doc)
        return parser

    @property
    def config(self) -> ParserConfig:
        return self._config

    def add_option(
        self,
        long_name: str,
        takes_value: bool,
        short_name: str = "",
        doc: str = "",
    ) -> Parser:
        """Register an option. Must be called before parsing starts."""
        if not long_name:
            raise ConfigError("long_name must be a non-empty string")
        if len(short_name) > 1:
            raise ConfigError(f"short_name must be at most one character: {short_name!r}")
        if any(option.long_name == long_name for option in self._config.options):
            logger.warning("option %r is already registered; lookups use the first one", long_name)

        spec = OptionSpec(
            long_name=long_name,
            short_name=short_name,
            takes_value=takes_value,
            doc=doc,
        )
        self._config = self._config.with_option(spec)
        return self

    def parse(self, line: str) -> ParseOutcome:
        return parse_line(self._config, line)
