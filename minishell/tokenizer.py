"""Split a command line into words and redirection/pipe operators."""

from __future__ import annotations

import enum

WHITESPACE = "\t\n\v\f\r "
OPERATOR_CHARS = "<>|"
MAX_OPERATOR_RUN = 15


class UnmatchedQuoteError(ValueError):
    """Raised when a quote opened in the input is never closed."""

    def __init__(self, message: str = "unmatched quote") -> None:
        super().__init__(message)


class QuoteState(enum.Enum):
    """Quoting state of the lexer while it walks the input."""

    NORMAL = "normal"
    IN_SQUOTE = "single"
    IN_DQUOTE = "double"

    def after(self, char: str) -> "QuoteState":
        """Return the state reached after reading ``char``."""
        if self is QuoteState.NORMAL:
            if char == "'":
                return QuoteState.IN_SQUOTE
            if char == '"':
                return QuoteState.IN_DQUOTE
        elif self is QuoteState.IN_SQUOTE and char == "'":
            return QuoteState.NORMAL
        elif self is QuoteState.IN_DQUOTE and char == '"':
            return QuoteState.NORMAL
        return self


def _operator_length(text: str, start: int) -> int:
    """Length of the operator token beginning at ``start``."""
    char = text[start]
    if char == "|":
        return 1
    length = 1
    while (
        start + length < len(text)
        and text[start + length] == char
        and length < MAX_OPERATOR_RUN
    ):
        length += 1
    return length


def _is_blank(token: str) -> bool:
    return all(ch in WHITESPACE for ch in token)


def smart_split(text: str) -> list[str]:
    """Split ``text`` into tokens, keeping quotes inside their words.

    Unquoted whitespace separates words; unquoted ``<``, ``>`` and ``|``
    form operator tokens of their own. Runs of ``<`` or ``>`` become one
    token of at most fifteen characters, while every ``|`` stands alone.
    Raises :class:`UnmatchedQuoteError` if a quote is left open.
    """
    tokens: list[str] = []
    current: list[str] = []
    state = QuoteState.NORMAL

    def flush() -> None:
        if current:
            tokens.append("".join(current))
            current.clear()

    index = 0
    while index < len(text):
        char = text[index]
        if state is QuoteState.NORMAL and char in WHITESPACE:
            flush()
            index += 1
            continue
        if state is QuoteState.NORMAL and char in OPERATOR_CHARS:
            flush()
            length = _operator_length(text, index)
            tokens.append(text[index:index + length])
            index += length
            continue
        state = state.after(char)
        current.append(char)
        index += 1

    if state is not QuoteState.NORMAL:
        raise UnmatchedQuoteError()
    flush()
    return [token for token in tokens if not _is_blank(token)]