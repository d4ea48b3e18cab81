"""Tokens, redirections and commands passed between parser and executor."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class TokenType(Enum):
    """Kinds of lexical token."""

    WORD = auto()
    REDIR_IN = auto()
    REDIR_OUT = auto()
    APPEND = auto()
    HEREDOC = auto()
    PIPE = auto()
    DOLLAR = auto()
    QUOTES = auto()
    DQUOTES = auto()
    EXPAND = auto()
    EOF = auto()
    ERROR = auto()


@dataclass
class Token:
    """A token produced by the lexer."""

    type: TokenType
    value: str
    position: int = 0
    shrinked: TokenType | None = None


@dataclass
class Redirection:
    """An input, output, append or heredoc redirection.

    For file redirections ``target`` is the file name; for heredocs it is
    the delimiter and ``content`` holds the collected lines.
    """

    target: str
    type: TokenType
    content: list[str] | None = None
    expand: bool = True

    def is_output(self) -> bool:
        """Return True for redirections that write to a file."""
        return self.type in (TokenType.REDIR_OUT, TokenType.APPEND)


@dataclass
class Command:
    """One command of a pipeline with its arguments and redirections."""

    args: list[str] = field(default_factory=list)
    redirections: list[Redirection] = field(default_factory=list)
    pid: int | None = None

    @property
    def name(self) -> str | None:
        """The command word, or None for an empty command."""
        return self.args[0] if self.args else None

    def add_redirection(self, redirection: Redirection) -> None:
        """Append a redirection, keeping the order they were written in."""
        self.redirections.append(redirection)