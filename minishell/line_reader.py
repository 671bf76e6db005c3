"""Read one command line from the user, joining continuation lines."""

from __future__ import annotations

import sys
from collections.abc import Callable, MutableSequence
from typing import Optional

from .quotes import ParseContext

PROMPT = "$ [minishell] > "
CONTINUATION_PROMPT = "> "
QUOTE_ERROR = "minishell: syntax error: unmatched quote"
INTERRUPTED_STATUS = 130
SYNTAX_ERROR_STATUS = 2

LineSource = Callable[[str], Optional[str]]


class EndOfInput(Exception):
    """Raised when the input stream is exhausted and the shell should exit."""


def has_unclosed_quotes(text: str) -> bool:
    """Return whether a single or double quote in ``text`` is left open."""
    quote = ""
    for char in text:
        if char in "\"'" and not quote:
            quote = char
        elif char == quote:
            quote = ""
    return bool(quote)


def needs_continuation(text: str) -> bool:
    """Return whether ``text`` ends with ``|``, ``||`` or ``&&``."""
    return text.endswith("|") or text.endswith("&&")


def read_input(
    ctx: ParseContext, read_line: LineSource, history: MutableSequence[str]
) -> str | None:
    """Read a command line.

    ``read_line`` is called with a prompt and returns a line or ``None`` at
    end of input. Returns the line, or ``None`` when there is nothing to run:
    a blank line (exit status 0), an unmatched quote (status 2) or an
    interrupted continuation (status 130). Lines ending in a pipe or ``&&``
    are joined with further input. A non-empty result is appended to
    ``history``. Raises :class:`EndOfInput` at end of input, after printing
    ``exit``.
    """
    text = read_line(PROMPT)
    if text is None:
        print("exit")
        raise EndOfInput()
    if not text.strip(" "):
        ctx.exit_status = 0
        return None
    if has_unclosed_quotes(text):
        print(QUOTE_ERROR, file=sys.stderr)
        ctx.exit_status = SYNTAX_ERROR_STATUS
        return None
    while needs_continuation(text):
        try:
            more = read_line(CONTINUATION_PROMPT)
        except KeyboardInterrupt:
            ctx.exit_status = INTERRUPTED_STATUS
            return None
        if more is None:
            break
        text += more
    if text:
        history.append(text)
    return text