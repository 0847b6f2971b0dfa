"""Quote-aware splitting of an input line into tokens."""

from __future__ import annotations

_QUOTE_CHARS = frozenset(("'", '"'))


def tokenize(line: str) -> list[str]:
    """Split *line* on spaces, keeping quoted spans together.

    Only the space character delimits; tabs and other whitespace stay
    inside the token.

    Single and double quotes share one toggle and are dropped from the
    output. An unterminated quote is not an error: the remainder of the
    line becomes part of the last token. Empty tokens are never emitted.

    Examples:
        '-n="John Doe" --age=20 -h' -> ['-n=John Doe', '--age=20', '-h']
        '   ' -> []
    """
    tokens: list[str] = []
    current: list[str] = []
    in_quotes = False

    for ch in line:
        if ch in _QUOTE_CHARS:
            in_quotes = not in_quotes
        elif ch == " " and not in_quotes:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(ch)

    if current:
        tokens.append("".join(current))
    return tokens
