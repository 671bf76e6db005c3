"""Split a command line into pipeline segments."""

from __future__ import annotations

from .tokenizer import WHITESPACE


def trim_segment(line: str, start: int, end: int) -> str:
    """Return ``line[start:end]`` with surrounding whitespace removed."""
    return line[start:end].strip(WHITESPACE)


def _next_quote(char: str, quote: str) -> str:
    if char in "\"'" and not quote:
        return char
    if char == quote:
        return ""
    return quote


def split_by_pipes(line: str) -> list[str]:
    """Split ``line`` on pipes that are not inside quotes.

    Each segment is trimmed of whitespace. A trailing segment that is
    left inside an open quote is dropped.
    """
    parts: list[str] = []
    start = 0
    quote = ""
    for index, char in enumerate(line):
        quote = _next_quote(char, quote)
        if not quote and char == "|":
            parts.append(trim_segment(line, start, index))
            start = index + 1
    if not quote:
        parts.append(trim_segment(line, start, len(line)))
    return parts