"""Opening redirection targets and collecting heredoc input."""

from __future__ import annotations

import os
import sys
import tempfile
from collections.abc import Callable, Iterable
from typing import Any

from minishell.expansion import expand
from minishell.state import Shell
from minishell.structures import Command, Redirection, TokenType

HEREDOC_PROMPT = "heredoc> "
EOF_WARNING = "minihell: warning: heredoc delimited by end-of-file \n"
INTERRUPTED_STATUS = 130
OUTPUT_MODE = 0o644


class RedirectionError(Exception):
    """A redirection target could not be opened."""

    def __init__(self, target: str, reason: str) -> None:
        self.target = target
        self.reason = reason
        super().__init__(f"{target}: {reason}")


def _default_read_line(prompt: str) -> str | None:
    try:
        return input(prompt)
    except EOFError:
        return None


def read_heredoc(redirection: Redirection, shell: Shell,
                 read_line: Callable[[str], str | None] | None = None) -> bool:
    """Collect heredoc lines up to the delimiter into ``redirection.content``.

    ``read_line`` is called with the prompt and returns a line, or None at
    end of input. An interrupt (KeyboardInterrupt) drops what was read,
    sets the shell status to 130 and returns False.
    """
    reader = read_line if read_line is not None else _default_read_line
    collected = list(redirection.content or [])
    while True:
        try:
            line = reader(HEREDOC_PROMPT)
        except KeyboardInterrupt:
            sys.stdout.write("\n")
            redirection.content = None
            shell.status = INTERRUPTED_STATUS
            return False
        if line is None:
            sys.stdout.write(EOF_WARNING)
            break
        if line == redirection.target:
            break
        collected.append(expand(line, shell) if redirection.expand else line)
    redirection.content = collected
    return True


def _heredoc_stream(redirection: Redirection) -> Any:
    stream = tempfile.TemporaryFile()
    for line in redirection.content or ():
        stream.write(line.encode("utf-8") + b"\n")
    stream.seek(0)
    return stream


def _open_input(redirection: Redirection) -> Any:
    try:
        return open(redirection.target, "rb")
    except OSError as exc:
        raise RedirectionError(redirection.target,
                               exc.strerror or str(exc)) from exc


def _open_output(redirection: Redirection) -> Any:
    flags = os.O_WRONLY | os.O_CREAT
    flags |= os.O_APPEND if redirection.type is TokenType.APPEND else os.O_TRUNC
    try:
        fd = os.open(redirection.target, flags, OUTPUT_MODE)
    except OSError as exc:
        raise RedirectionError(redirection.target,
                               exc.strerror or str(exc)) from exc
    return os.fdopen(fd, "ab" if redirection.type is TokenType.APPEND else "wb")


def _replace(old: Any, new: Any, opened: list[Any]) -> Any:
    if any(old is stream for stream in opened):
        old.close()
    opened.append(new)
    return new


def apply_redirections(command: Command, stdin: Any = None,
                       stdout: Any = None) -> tuple[Any, Any]:
    """Apply the command's redirections in order and return (stdin, stdout).

    Each redirection replaces the stream of its direction; a replaced
    stream that was opened here is closed again. Streams passed in are
    never closed. New streams are binary file objects owned by the caller.
    """
    opened: list[Any] = []
    try:
        for redirection in command.redirections:
            if redirection.type is TokenType.HEREDOC:
                stdin = _replace(stdin, _heredoc_stream(redirection), opened)
            elif redirection.type is TokenType.REDIR_IN:
                stdin = _replace(stdin, _open_input(redirection), opened)
            else:
                stdout = _replace(stdout, _open_output(redirection), opened)
    except RedirectionError:
        for stream in opened:
            stream.close()
        raise
    return stdin, stdout


def clear_heredocs(commands: Iterable[Command]) -> None:
    """Drop the collected content of every heredoc."""
    for command in commands:
        for redirection in command.redirections:
            if redirection.type is TokenType.HEREDOC:
                redirection.content = None