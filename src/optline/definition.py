"""Parser definitions stored as JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from .errors import ConfigError
from .models import ParserConfig
from .parser import Parser

logger = logging.getLogger(__name__)


class OptionDefinition(BaseModel):
    long_name: str
    short_name: str = ""
    takes_value: bool = False
    doc: str = ""


class ParserDefinition(BaseModel):
    program_name: str
    description: str = ""
    examples: str = ""
    options: list[OptionDefinition] = []


def definition_from_dict(data: Any) -> ParserConfig:
    """Validate a decoded JSON document and build a ParserConfig from it."""
    try:
        definition = ParserDefinition.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid parser definition: {exc}") from exc

    parser = Parser(definition.program_name, definition.description, definition.examples)
    for option in definition.options:
        parser.add_option(option.long_name, option.takes_value, option.short_name, option.doc)
    return parser.config


def load_definition(path: Path) -> ParserConfig:
    """Load a parser definition from a JSON file."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Definition file {path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Could not read definition file {path}: {exc}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Definition file {path} is not valid JSON: {exc}") from exc

    config = definition_from_dict(data)
    logger.debug("loaded %d option(s) for %s from %s", len(config.options), config.program_name, path)
    return config


def dump_definition(config: ParserConfig, path: Path) -> None:
    """Write *config* as an indent-2 JSON definition file.

    Creates parent directories if needed.
    Appends a trailing newline.
    """
    definition = ParserDefinition(
        program_name=config.program_name,
        description=config.description,
        examples=config.examples,
        options=[
            OptionDefinition(
                long_name=option.long_name,
                short_name=option.short_name,
                takes_value=option.takes_value,
                doc=option.doc,
            )
            for option in config.options
        ],
    )
    path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(definition.model_dump(mode="json"), indent=2, ensure_ascii=False)
    path.write_text(text + "\n", encoding="utf-8")
