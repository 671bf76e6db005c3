"""Syntax checks applied to a tokenized command line."""

from __future__ import annotations

from collections.abc import Sequence

from .quotes import ParseContext

OPERATORS = frozenset({"|", ">>", "<<", ">", "<"})
REDIRECTION_OPERATORS = frozenset({">>", "<<", ">", "<"})
SYNTAX_ERROR_STATUS = 2

PIPE_ERROR = "bash: syntax error near unexpected token `|'"
REDIRECTION_ERROR = "bash: syntax error near unexpected token `>'"


class ShellSyntaxError(ValueError):
    """A command line that cannot be parsed.

    ``message`` is the text to report to the user; it is empty when the
    failure is not reported.
    """

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


def is_operator(token: str | None) -> bool:
    """Return whether ``token`` is a pipe or redirection operator."""
    return token is not None and token in OPERATORS


def syntax_error_message(token: str | None) -> str:
    """Message for an unexpected ``token``; ``None`` stands for end of line."""
    shown = "newline" if token is None else token
    return f"minishell: syntax error near unexpected token `{shown}'"


def _following(tokens: Sequence[str], index: int) -> str | None:
    return tokens[index + 1] if index + 1 < len(tokens) else None


def validate_pipe_syntax(tokens: Sequence[str], index: int) -> None:
    """Check the pipe at ``index``; raise :class:`ShellSyntaxError` if misplaced."""
    if index == 0:
        raise ShellSyntaxError(syntax_error_message(tokens[0]))
    following = _following(tokens, index)
    if following is None or is_operator(following):
        raise ShellSyntaxError(syntax_error_message(following))


def validate_redirection_syntax(tokens: Sequence[str], index: int) -> None:
    """Check that the redirection at ``index`` is followed by a word."""
    following = _following(tokens, index)
    if following is None or is_operator(following):
        raise ShellSyntaxError(syntax_error_message(following))


def _is_triple_pipe(tokens: Sequence[str], index: int) -> bool:
    if tokens[index] == "|||":
        return True
    return list(tokens[index:index + 3]) == ["|", "|", "|"]


def _is_invalid_redirection(token: str) -> bool:
    return token[:1] in ("<", ">") and token not in REDIRECTION_OPERATORS


def validate_syntax(tokens: Sequence[str], ctx: ParseContext) -> None:
    """Reject a leading pipe, runs of three pipes and malformed redirections.

    On failure the exit status in ``ctx`` is set to 2 and
    :class:`ShellSyntaxError` is raised.
    """
    if not tokens:
        return
    if tokens[0] == "|":
        ctx.exit_status = SYNTAX_ERROR_STATUS
        raise ShellSyntaxError(PIPE_ERROR)
    for index, token in enumerate(tokens):
        if _is_triple_pipe(tokens, index):
            ctx.exit_status = SYNTAX_ERROR_STATUS
            raise ShellSyntaxError(PIPE_ERROR)
        if _is_invalid_redirection(token):
            ctx.exit_status = SYNTAX_ERROR_STATUS
            raise ShellSyntaxError(REDIRECTION_ERROR)