"""Lookup of registered options by long or short name."""

from __future__ import annotations

from collections.abc import Iterable

from .models import OptionSpec


def find_option(options: Iterable[OptionSpec], key: str) -> OptionSpec | None:
    """Return the first option whose long or short name equals *key*."""
    if not key:
        return None
    for option in options:
        if key == option.long_name or key == option.short_name:
            return option
    return None


def option_exists(options: Iterable[OptionSpec], key: str) -> bool:
    return find_option(options, key) is not None
