"""Command-line option parsing for single input lines."""

from .definition import dump_definition, load_definition
from .errors import ConfigError, OptlineError
from .help import render_global_help, render_option_help
from .models import (
    PRESENT,
    ErrorOutcome,
    HelpOutcome,
    OptionSpec,
    ParseOutcome,
    ParserConfig,
    ValuesOutcome,
)
from .options import find_option, option_exists
from .parser import Parser, parse_line
from .tokenizer import tokenize

__all__ = [
    "PRESENT",
    "ConfigError",
    "ErrorOutcome",
    "HelpOutcome",
    "OptionSpec",
    "OptlineError",
    "ParseOutcome",
    "Parser",
    "ParserConfig",
    "ValuesOutcome",
    "dump_definition",
    "find_option",
    "load_definition",
    "option_exists",
    "parse_line",
    "render_global_help",
    "render_option_help",
    "tokenize",
]
