"""Collect here-document bodies for the commands of a pipeline."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from typing import Optional

from .ast import Command, Redirection, RedirType
from .quotes import ParseContext

HEREDOC_PROMPT = "> "
INTERRUPTED_STATUS = 130

LineSource = Callable[[str], Optional[str]]


def read_heredoc(redir: Redirection, ctx: ParseContext, read_line: LineSource) -> None:
    """Read the body of one here-document into ``redir.content``.

    ``read_line`` is called with the prompt and returns a line, or ``None``
    at end of input; an interrupt is signalled by ``KeyboardInterrupt``.
    Lines are read until one equals the delimiter or input ends. Unless the
    delimiter was quoted, each line has its variables expanded. On an
    interrupt the body is discarded, ``ctx.heredoc_interrupted`` is set and
    the exit status becomes 130.
    """
    body: list[str] = []
    try:
        while True:
            line = read_line(HEREDOC_PROMPT)
            if line is None or line == redir.target:
                break
            body.append(line if redir.quoted else ctx.expand(line))
    except KeyboardInterrupt:
        sys.stderr.write("\n")
        redir.content = None
        ctx.heredoc_interrupted = True
        ctx.exit_status = INTERRUPTED_STATUS
        return
    redir.content = "".join(f"{line}\n" for line in body)


def _heredocs(commands: Iterable[Command]) -> Iterable[Redirection]:
    for command in commands:
        for redir in command.redirs:
            if redir.kind is RedirType.HEREDOC:
                yield redir


def _discard_heredocs(commands: list[Command]) -> None:
    for redir in _heredocs(commands):
        redir.content = None


def process_heredocs(
    commands: Iterable[Command], ctx: ParseContext, read_line: LineSource
) -> None:
    """Read every here-document of ``commands`` in order.

    Stops at the first interrupted one, or whenever the exit status is 130
    after a read; in that case every here-document body of the pipeline,
    including those already read, is discarded.
    """
    commands = list(commands)
    ctx.heredoc_interrupted = False
    for redir in _heredocs(commands):
        read_heredoc(redir, ctx, read_line)
        if ctx.heredoc_interrupted or ctx.exit_status == INTERRUPTED_STATUS:
            _discard_heredocs(commands)
            return