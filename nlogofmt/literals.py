"""
Reader for constant literals embedded in widgets (chooser choices and the like).

    read_from_string('[1 "two" [true false] nobody]')
    -> [1, 'two', [True, False], None]
"""

from __future__ import annotations

import re
from typing import Any, Callable

from nlogofmt.errors import NLogoFormatError

LiteralParser = Callable[[str], Any]

_TOKEN = re.compile(
    r"""
    \s*(?:
        (?P<open>\[)
      | (?P<close>\])
      | (?P<string>"(?:[^"\\]|\\.)*")
      | (?P<number>-?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)(?=[\s\[\]]|$)
      | (?P<word>[^\s\[\]"]+)
    )
    """,
    re.VERBOSE,
)

_WORDS = {"true": True, "false": False, "nobody": None}

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", '"': '"', "\\": "\\"}


class LiteralError(NLogoFormatError):
    """Text is not a constant literal."""


def _unquote(token: str) -> str:
    return re.sub(r"\\(.)", lambda m: _ESCAPES.get(m.group(1), m.group(1)), token[1:-1])


def _tokens(text: str) -> list[tuple[str, str]]:
    tokens = []
    pos = 0
    text = text.rstrip()
    while pos < len(text):
        match = _TOKEN.match(text, pos)
        if match is None or match.end() == pos:
            raise LiteralError(f"Unreadable literal at position {pos}: {text!r}")
        tokens.append((match.lastgroup, match.group(match.lastgroup)))
        pos = match.end()
    return tokens


def read_from_string(text: str) -> Any:
    """Read exactly one literal from text."""
    tokens = _tokens(text)
    if not tokens:
        raise LiteralError("Expected a literal, found nothing")
    value, pos = _read(tokens, 0)
    if pos != len(tokens):
        raise LiteralError(f"Unexpected trailing input in {text!r}")
    return value


def _read(tokens: list[tuple[str, str]], pos: int) -> tuple[Any, int]:
    kind, token = tokens[pos]
    if kind == "open":
        items = []
        pos += 1
        while pos < len(tokens) and tokens[pos][0] != "close":
            item, pos = _read(tokens, pos)
            items.append(item)
        if pos == len(tokens):
            raise LiteralError("Unterminated list")
        return items, pos + 1
    if kind == "close":
        raise LiteralError("Unexpected ]")
    if kind == "string":
        return _unquote(token), pos + 1
    if kind == "number":
        if re.fullmatch(r"-?\d+", token):
            return int(token), pos + 1
        return float(token), pos + 1
    word = token.lower()
    if word not in _WORDS:
        raise LiteralError(f"Not a constant: {token}")
    return _WORDS[word], pos + 1
