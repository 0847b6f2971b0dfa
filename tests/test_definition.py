"""Tests for JSON parser definitions."""

import json
from pathlib import Path

import pytest

from optline.definition import definition_from_dict, dump_definition, load_definition
from optline.errors import ConfigError
from optline.models import OptionSpec, ParserConfig, ValuesOutcome
from optline.parser import parse_line


def test_load_definition(definition_file: Path) -> None:
    config = load_definition(definition_file)

    assert config.program_name == "greet"
    assert config.example_lines == ["greet --name=Ann", "greet -n Bob -v"]
    assert config.options == (
        OptionSpec("name", "n", True, "Who to greet"),
        OptionSpec("verbose", "v", False, "Print more"),
    )


def test_loaded_definition_parses(definition_file: Path) -> None:
    config = load_definition(definition_file)

    assert parse_line(config, "-n Bob -v") == ValuesOutcome({"name": "Bob", "verbose": "present"})


def test_definition_defaults() -> None:
    config = definition_from_dict({"program_name": "p"})

    assert config == ParserConfig(program_name="p")


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Could not read definition file"):
        load_definition(tmp_path / "missing.json")


def test_load_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigError, match="not valid JSON"):
        load_definition(path)


def test_schema_violation() -> None:
    with pytest.raises(ConfigError, match="Invalid parser definition"):
        definition_from_dict({"description": "no program name"})


def test_option_validation_error(definition_data: dict) -> None:
    definition_data["options"][0]["short_name"] = "nm"

    with pytest.raises(ConfigError, match="short_name"):
        definition_from_dict(definition_data)


def test_dump_definition(tmp_path: Path, definition_file: Path) -> None:
    config = load_definition(definition_file)
    path = tmp_path / "nested" / "out.json"

    dump_definition(config, path)

    content = path.read_text(encoding="utf-8")
    assert content.endswith("\n")
    data = json.loads(content)
    assert data["program_name"] == "greet"
    assert data["options"][1] == {
        "long_name": "verbose",
        "short_name": "v",
        "takes_value": False,
        "doc": "Print more",
    }
    assert load_definition(path) == config


def test_load_non_utf8_file(tmp_path: Path) -> None:
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"program_name": "\xff"}')

    with pytest.raises(ConfigError, match="not valid UTF-8"):
        load_definition(path)
