import pytest

from minishell.quotes import ParseContext
from minishell.syntax import (
    ShellSyntaxError,
    is_operator,
    syntax_error_message,
    validate_pipe_syntax,
    validate_redirection_syntax,
    validate_syntax,
)

PIPE_MESSAGE = "bash: syntax error near unexpected token `|'"
REDIR_MESSAGE = "bash: syntax error near unexpected token `>'"


@pytest.mark.parametrize("token", ["|", ">>", "<<", ">", "<"])
def test_operators_are_recognised(token):
    assert is_operator(token) is True


@pytest.mark.parametrize("token", [None, "echo", "||", ">>>", "'|'"])
def test_non_operators(token):
    assert is_operator(token) is False


def test_syntax_error_message_for_token():
    assert syntax_error_message(">") == "minishell: syntax error near unexpected token `>'"


def test_syntax_error_message_for_end_of_line():
    assert syntax_error_message(None) == (
        "minishell: syntax error near unexpected token `newline'"
    )


def test_pipe_at_start_is_rejected():
    with pytest.raises(ShellSyntaxError) as info:
        validate_pipe_syntax(["|", "ls"], 0)
    assert info.value.message == syntax_error_message("|")


def test_pipe_at_end_reports_newline():
    with pytest.raises(ShellSyntaxError) as info:
        validate_pipe_syntax(["ls", "|"], 1)
    assert info.value.message == syntax_error_message(None)


def test_pipe_before_operator_reports_operator():
    with pytest.raises(ShellSyntaxError) as info:
        validate_pipe_syntax(["ls", "|", "<"], 1)
    assert info.value.message == syntax_error_message("<")


def test_pipe_between_words_is_accepted():
    assert validate_pipe_syntax(["ls", "|", "wc"], 1) is None
    with pytest.raises(ShellSyntaxError):
        validate_pipe_syntax(["ls", "|", "|"], 1)


def test_redirection_without_target():
    with pytest.raises(ShellSyntaxError) as info:
        validate_redirection_syntax([">"], 0)
    assert info.value.message == syntax_error_message(None)


def test_redirection_followed_by_operator():
    with pytest.raises(ShellSyntaxError) as info:
        validate_redirection_syntax([">", "|"], 0)
    assert info.value.message == syntax_error_message("|")


def test_redirection_with_target_is_accepted():
    assert validate_redirection_syntax(["<", "in.txt"], 0) is None
    with pytest.raises(ShellSyntaxError):
        validate_redirection_syntax(["<", ">"], 0)


def test_empty_token_list_keeps_status():
    ctx = ParseContext(exit_status=7)
    validate_syntax([], ctx)
    assert ctx.exit_status == 7


def test_valid_tokens_keep_status():
    ctx = ParseContext(exit_status=5)
    validate_syntax(["echo", ">", "f", "|", "cat"], ctx)
    assert ctx.exit_status == 5


def test_leading_pipe_sets_status():
    ctx = ParseContext()
    with pytest.raises(ShellSyntaxError) as info:
        validate_syntax(["|", "ls"], ctx)
    assert info.value.message == PIPE_MESSAGE
    assert ctx.exit_status == 2


@pytest.mark.parametrize(
    "tokens",
    [["a", "|", "|", "|", "b"], ["|||"], ["a", "|||", "b"]],
)
def test_triple_pipes_are_rejected(tokens):
    ctx = ParseContext()
    with pytest.raises(ShellSyntaxError) as info:
        validate_syntax(tokens, ctx)
    assert info.value.message == PIPE_MESSAGE
    assert ctx.exit_status == 2


@pytest.mark.parametrize("token", [">>>", "<<<", "<>", "><"])
def test_malformed_redirections_are_rejected(token):
    ctx = ParseContext()
    with pytest.raises(ShellSyntaxError) as info:
        validate_syntax(["cat", token, "f"], ctx)
    assert info.value.message == REDIR_MESSAGE
    assert ctx.exit_status == 2


def test_error_is_a_value_error():
    with pytest.raises(ValueError):
        validate_syntax(["|"], ParseContext())