"""Quote removal and variable expansion for single tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .tokenizer import UnmatchedQuoteError

_VARIABLE = re.compile(r"\$(\?|[A-Za-z_][A-Za-z0-9_]*)")


@dataclass
class ParseContext:
    """Shell state that parsing depends on."""

    env: dict[str, str] = field(default_factory=dict)
    exit_status: int = 0
    heredoc_interrupted: bool = False

    def expand(self, text: str) -> str:
        """Replace ``$NAME`` and ``$?`` in ``text``; unset names become empty."""

        def replace(match: re.Match[str]) -> str:
            name = match.group(1)
            if name == "?":
                return str(self.exit_status)
            return self.env.get(name, "")

        return _VARIABLE.sub(replace, text)


def process_double_quotes(token: str, ctx: ParseContext) -> str:
    """Strip the surrounding double quotes of ``token`` and expand the rest."""
    if len(token) < 2:
        return ""
    return ctx.expand(token[1:-1])


def _quoted_part(token: str, start: int, ctx: ParseContext) -> tuple[str, int]:
    quote = token[start]
    close = token.find(quote, start + 1)
    if close == -1:
        raise UnmatchedQuoteError()
    part = token[start:close + 1]
    if quote == "'":
        return part[1:-1], close + 1
    return process_double_quotes(part, ctx), close + 1


def _unquoted_part(token: str, start: int, ctx: ParseContext) -> tuple[str, int]:
    end = start
    while end < len(token) and token[end] not in "'\"":
        end += 1
    return ctx.expand(token[start:end]), end


def handle_quotes(token: str, ctx: ParseContext) -> str:
    """Remove quotes from ``token``, expanding variables outside single quotes.

    Raises :class:`UnmatchedQuoteError` if a quote in ``token`` is not closed.
    """
    pieces: list[str] = []
    index = 0
    while index < len(token):
        if token[index] in "'\"":
            piece, index = _quoted_part(token, index, ctx)
        else:
            piece, index = _unquoted_part(token, index, ctx)
        pieces.append(piece)
    return "".join(pieces)


def remove_all_quotes(text: str) -> str:
    """Return ``text`` with every single and double quote character removed."""
    return text.replace('"', "").replace("'", "")