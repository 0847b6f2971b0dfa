"""Pytest configuration and fixtures for optline tests."""

import json
from pathlib import Path

import pytest

from optline.models import ParserConfig
from optline.parser import Parser


@pytest.fixture
def person_parser() -> Parser:
    """Parser with two value options and one flag."""
    parser = Parser("test", "A test program", 'test -n="John Doe" --age=20\ntest --verbose')
    parser.add_option("name", True, "n", "The name of the person")
    parser.add_option("age", True, "a", "The age of the person")
    parser.add_option("verbose", False, "v", "Print more output")
    return parser


@pytest.fixture
def person_config(person_parser: Parser) -> ParserConfig:
    return person_parser.config


@pytest.fixture
def definition_data() -> dict:
    return {
        "program_name": "greet",
        "description": "Greets a person",
        "examples": "greet --name=Ann\ngreet -n Bob -v",
        "options": [
            {"long_name": "name", "short_name": "n", "takes_value": True, "doc": "Who to greet"},
            {"long_name": "verbose", "short_name": "v", "doc": "Print more"},
        ],
    }


@pytest.fixture
def definition_file(tmp_path: Path, definition_data: dict) -> Path:
    path = tmp_path / "greet.json"
    path.write_text(json.dumps(definition_data, indent=2), encoding="utf-8")
    return path
