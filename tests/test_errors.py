import pytest

from minishell.errors import (
    MSG_MEMORY,
    MSG_SYNTAX,
    ErrorCode,
    ShellError,
    error_message,
    handle_error,
)


def test_success_message():
    assert error_message(ErrorCode.SUCCESS) == "Success"


@pytest.mark.parametrize(
    "code, expected",
    [
        (ErrorCode.MEMORY, "Memory allocation failed"),
        (ErrorCode.ARGS, "Invalid arguments"),
        (ErrorCode.ENV, "Environment error"),
        (ErrorCode.CWD, "Cannot access current working directory"),
        (ErrorCode.PIPE, "Pipe creation failed"),
        (ErrorCode.FORK, "Process creation failed"),
        (ErrorCode.EXEC, "Command execution failed"),
        (ErrorCode.SYNTAX, "Syntax error"),
    ],
)
def test_known_messages(code, expected):
    assert error_message(code) == expected


def test_plain_int_code_accepted():
    assert error_message(int(ErrorCode.SYNTAX)) == MSG_SYNTAX


@pytest.mark.parametrize("code", [-1, len(ErrorCode), 100])
def test_unknown_code(code):
    assert error_message(code) == "Unknown error"


def test_handle_error_default_message(capsys):
    handle_error(ErrorCode.MEMORY)
    assert capsys.readouterr().out == "Erreur : Memory allocation failed\n"


def test_handle_error_custom_message_wins(capsys):
    handle_error(ErrorCode.MEMORY, "disk gone")
    assert capsys.readouterr().out == "Erreur : disk gone\n"


def test_handle_error_unknown_code(capsys):
    handle_error(999)
    assert capsys.readouterr().out == "Erreur : Unknown error\n"


def test_handle_error_empty_custom_message_falls_back(capsys):
    handle_error(ErrorCode.SYNTAX, "")
    assert capsys.readouterr().out == "Erreur : Syntax error\n"


def test_shell_error_default_message():
    err = ShellError(ErrorCode.MEMORY)
    assert err.code == ErrorCode.MEMORY
    assert str(err) == MSG_MEMORY


def test_shell_error_custom_message():
    err = ShellError(ErrorCode.EXEC, "bad thing")
    assert err.code == ErrorCode.EXEC
    assert err.message == "bad thing"
    assert str(err) == "bad thing"