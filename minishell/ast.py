"""Build command structures from a command line."""

from __future__ import annotations

import enum
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from .pipes import split_by_pipes
from .quotes import ParseContext, handle_quotes, remove_all_quotes
from .syntax import PIPE_ERROR, SYNTAX_ERROR_STATUS, ShellSyntaxError, validate_syntax
from .tokenizer import WHITESPACE, UnmatchedQuoteError, smart_split

UNMATCHED_QUOTE_ERROR = "minishell: error: unmatched quote"


class RedirType(enum.Enum):
    """Kind of redirection, valued by its operator."""

    IN = "<"
    OUT = ">"
    APPEND = ">>"
    HEREDOC = "<<"


@dataclass
class Redirection:
    """One redirection of a command.

    ``quoted`` records whether a here-document delimiter was quoted, and
    ``content`` receives the here-document body once it has been read.
    """

    kind: RedirType
    target: str
    quoted: bool = False
    content: str | None = None


@dataclass
class Command:
    """One simple command of a pipeline."""

    command: str | None = None
    args: list[str] = field(default_factory=list)
    redirs: list[Redirection] = field(default_factory=list)


def create_redirection(kind: RedirType, raw_target: str, ctx: ParseContext) -> Redirection:
    """Make a redirection, removing quotes from its target.

    Targets are expanded unless they begin with a single quote; here-document
    delimiters are never expanded.
    """
    quoted = '"' in raw_target or "'" in raw_target
    target = remove_all_quotes(raw_target)
    if kind is RedirType.HEREDOC:
        return Redirection(kind, target, quoted=quoted)
    if not raw_target.startswith("'"):
        target = ctx.expand(target)
    return Redirection(kind, target)


def extract_first_command_word(text: str) -> str:
    """Return the first word of ``text`` after trimming spaces and tabs."""
    trimmed = text.strip(" \t")
    end = next(
        (index for index, char in enumerate(trimmed) if char in WHITESPACE),
        len(trimmed),
    )
    return trimmed[:end]


def _classify(tokens: Sequence[str]) -> Iterator[tuple[RedirType | None, str]]:
    """Yield ``(kind, target)`` for redirections and ``(None, word)`` for words."""
    stream = iter(tokens)
    for token in stream:
        if token == "|":
            continue
        try:
            kind = RedirType(token)
        except ValueError:
            yield None, token
            continue
        target = next(stream, None)
        if target is None:
            yield None, token
        else:
            yield kind, target


def _is_fully_quoted(token: str) -> bool:
    return bool(token) and token[0] in "\"'" and token[0] == token[-1]


def tokenize_input(text: str, ctx: ParseContext) -> Command | None:
    """Parse one pipeline segment into a :class:`Command`.

    Returns ``None`` when the segment holds neither a command nor a
    redirection. Raises :class:`ShellSyntaxError` on bad syntax, with the
    exit status in ``ctx`` set to 2.
    """
    try:
        tokens = smart_split(text)
    except UnmatchedQuoteError as exc:
        ctx.exit_status = SYNTAX_ERROR_STATUS
        raise ShellSyntaxError(UNMATCHED_QUOTE_ERROR) from exc
    validate_syntax(tokens, ctx)

    parts = list(_classify(tokens))
    node = Command(
        redirs=[
            create_redirection(kind, target, ctx)
            for kind, target in parts
            if kind is not None
        ]
    )
    words = [word for kind, word in parts if kind is None]
    for word in words:
        try:
            expanded = handle_quotes(word, ctx)
        except UnmatchedQuoteError as exc:
            if node.redirs and node.redirs[0].kind is RedirType.HEREDOC:
                break
            ctx.exit_status = SYNTAX_ERROR_STATUS
            raise ShellSyntaxError(UNMATCHED_QUOTE_ERROR) from exc
        if not node.args:
            node.command = word if _is_fully_quoted(word) else extract_first_command_word(expanded)
        node.args.append(expanded)

    if node.command is None and not node.redirs:
        return None
    return node


def build_pipeline(text: str, ctx: ParseContext) -> list[Command]:
    """Parse a whole command line into the commands of its pipeline.

    Raises :class:`ShellSyntaxError` with the exit status in ``ctx`` set to 2
    if the line starts with a pipe, if any segment is malformed, or if a
    segment is empty (the last case carries no message).
    """
    if text.strip(" \t").startswith("|"):
        ctx.exit_status = SYNTAX_ERROR_STATUS
        raise ShellSyntaxError(PIPE_ERROR)
    commands: list[Command] = []
    for segment in split_by_pipes(text):
        try:
            node = tokenize_input(segment, ctx)
        except ShellSyntaxError:
            ctx.exit_status = SYNTAX_ERROR_STATUS
            raise
        if node is None:
            ctx.exit_status = SYNTAX_ERROR_STATUS
            raise ShellSyntaxError()
        commands.append(node)
    return commands