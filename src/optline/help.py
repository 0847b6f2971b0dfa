"""Help text rendering."""

from __future__ import annotations

from .models import OptionSpec, ParserConfig


def _option_line(option: OptionSpec) -> str:
    return f"-{option.short_name} --{option.long_name}: {option.doc} ({option.kind_label})"


def render_option_help(option: OptionSpec) -> str:
    """Render the help line shown for `--help <option>`."""
    return f"{_option_line(option)}\n"


def render_global_help(config: ParserConfig) -> str:
    """Render usage, every option summary, and the examples block."""
    parts = [f"Usage: {config.program_name} [OPTIONS] ...\n\n{config.description}\n"]
    for option in config.options:
        parts.append(f"\n  {_option_line(option)}\n")
    parts.append("Examples:\n")
    for line in config.example_lines:
        parts.append(f"    {line}\n")
    parts.append("\n")
    return "".join(parts)
