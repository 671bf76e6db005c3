"""Small string helpers: splitting, trimming and tokenising."""

from __future__ import annotations

from collections.abc import Iterator


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words.

    An empty ``sep`` leaves ``text`` whole. Raises ``ValueError`` if ``sep``
    is longer than one character.
    """
    if len(sep) > 1:
        raise ValueError("separator must be a single character")
    if not sep:
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def strtok(text: str, delims: str) -> Iterator[str]:
    """Yield the non-empty runs of ``text`` between characters of ``delims``."""
    current: list[str] = []
    for char in text:
        if char in delims:
            if current:
                yield "".join(current)
                current.clear()
        else:
            current.append(char)
    if current:
        yield "".join(current)