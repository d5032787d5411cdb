"""Command tokenizing for the plaintodo REPL."""

from __future__ import annotations


def next_token(text: str) -> tuple[str, str]:
    """Split off the first space-delimited token.

    Returns ``(token, rest)``. The single delimiting space is consumed and
    ``rest`` is otherwise kept verbatim:

        'add call mom' -> ('add', 'call mom')
        'close'        -> ('close', '')
    """
    token, sep, rest = text.partition(" ")
    if not sep:
        return text, ""
    return token, rest
