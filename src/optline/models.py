"""Domain models for optline."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

PRESENT = "present"
HELP_KEY = "help"
HELP_TOKENS = frozenset(("--help", "-h"))


@dataclass(frozen=True)
class OptionSpec:
    long_name: str
    short_name: str = ""
    takes_value: bool = False
    doc: str = ""

    @property
    def kind_label(self) -> str:
        return "takes input" if self.takes_value else "flag"


@dataclass(frozen=True)
class ParserConfig:
    program_name: str
    description: str = ""
    examples: str = ""
    options: tuple[OptionSpec, ...] = ()

    def with_option(self, spec: OptionSpec) -> ParserConfig:
        """Return a copy of this config with one more option registered."""
        return ParserConfig(
            program_name=self.program_name,
            description=self.description,
            examples=self.examples,
            options=(*self.options, spec),
        )

    @property
    def example_lines(self) -> list[str]:
        """Split on newlines only, dropping one trailing carriage return per line."""
        if not self.examples:
            return []
        lines = self.examples.split("\n")
        if lines[-1] == "":
            lines.pop()
        return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass(frozen=True)
class ParseOutcome:
    """Result of parsing one input line. Exactly one subclass is returned."""

    @property
    def ok(self) -> bool:
        return False

    def values_or_none(self) -> dict[str, str] | None:
        return None

    def help_or_none(self) -> str | None:
        return None

    def error_or_none(self) -> str | None:
        return None


@dataclass(frozen=True)
class ValuesOutcome(ParseOutcome):
    """Matched options keyed by long name. The mapping is read-only."""

    values: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def __hash__(self) -> int:
        return hash(frozenset(self.values.items()))

    @property
    def ok(self) -> bool:
        return True

    def values_or_none(self) -> dict[str, str] | None:
        return dict(self.values)


@dataclass(frozen=True)
class HelpOutcome(ParseOutcome):
    text: str

    def help_or_none(self) -> str | None:
        return self.text


@dataclass(frozen=True)
class ErrorOutcome(ParseOutcome):
    message: str

    def error_or_none(self) -> str | None:
        return self.message
