"""Rendering of parse outcomes for display."""

from __future__ import annotations

import json

from .models import ErrorOutcome, HelpOutcome, ParseOutcome, ValuesOutcome


def format_outcome(outcome: ParseOutcome) -> str:
    """Human-readable text: sorted key=value lines, help verbatim, or ERROR."""
    if isinstance(outcome, ValuesOutcome):
        return "\n".join(f"{key}={value}" for key, value in sorted(outcome.values.items()))
    if isinstance(outcome, HelpOutcome):
        return outcome.text.rstrip("\n")
    if isinstance(outcome, ErrorOutcome):
        return f"ERROR: {outcome.message}"
    raise TypeError(f"Unsupported outcome: {outcome!r}")


def outcome_to_json(outcome: ParseOutcome) -> str:
    if isinstance(outcome, ValuesOutcome):
        payload: dict[str, object] = {"values": dict(sorted(outcome.values.items()))}
    elif isinstance(outcome, HelpOutcome):
        payload = {"help": outcome.text}
    elif isinstance(outcome, ErrorOutcome):
        payload = {"error": outcome.message}
    else:
        raise TypeError(f"Unsupported outcome: {outcome!r}")
    return json.dumps(payload, ensure_ascii=False)
