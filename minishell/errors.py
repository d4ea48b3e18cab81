"""Error codes and messages used across the shell."""

from __future__ import annotations

from enum import IntEnum

MSG_MEMORY = "Memory allocation failed"
MSG_ARGS = "Invalid arguments"
MSG_ENV = "Environment error"
MSG_CWD = "Cannot access current working directory"
MSG_PIPE = "Pipe creation failed"
MSG_FORK = "Process creation failed"
MSG_EXEC = "Command execution failed"
MSG_SYNTAX = "Syntax error"
MSG_PIPE_SYNTAX = "Syntax error : missing command after pipe"
MSG_REDIR_SYNTAX = "Syntax error : missing file after redirection"
MSG_QUOTE_SYNTAX = "Syntax error : unterminated quote"
MSG_CONSEC_SYNTAX = "Syntax error : consecutive operators"

UNKNOWN_ERROR = "Unknown error"


class ErrorCode(IntEnum):
    """Kinds of failure the shell reports."""

    SUCCESS = 0
    MEMORY = 1
    ARGS = 2
    ENV = 3
    CWD = 4
    PIPE = 5
    FORK = 6
    EXEC = 7
    SYNTAX = 8


_MESSAGES = {
    ErrorCode.SUCCESS: "Success",
    ErrorCode.MEMORY: MSG_MEMORY,
    ErrorCode.ARGS: MSG_ARGS,
    ErrorCode.ENV: MSG_ENV,
    ErrorCode.CWD: MSG_CWD,
    ErrorCode.PIPE: MSG_PIPE,
    ErrorCode.FORK: MSG_FORK,
    ErrorCode.EXEC: MSG_EXEC,
    ErrorCode.SYNTAX: MSG_SYNTAX,
}


def error_message(code: int) -> str:
    """Return the message for an error code, or "Unknown error"."""
    try:
        return _MESSAGES[ErrorCode(code)]
    except (ValueError, KeyError):
        return UNKNOWN_ERROR


class ShellError(Exception):
    """An error raised by the shell, carrying an ErrorCode."""

    def __init__(self, code: int, message: str | None = None) -> None:
        self.code = code
        self.message = message if message is not None else error_message(code)
        super().__init__(self.message)


def handle_error(code: int, custom_message: str | None = None) -> None:
    """Print an error line for the given code or custom message."""
    text = custom_message if custom_message else error_message(code)
    print(f"Erreur : {text}")