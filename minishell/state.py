"""The state one shell session carries between commands."""

from __future__ import annotations

from dataclasses import dataclass, field

from minishell.environment import Environment
from minishell.structures import Command, Token


@dataclass
class Shell:
    """Session state: variables, last status and the current command line."""

    env: Environment = field(default_factory=Environment)
    status: int = 0
    argv: list[str] = field(default_factory=list)
    cwd: str | None = None
    input: str | None = None
    tokens: list[Token] = field(default_factory=list)
    commands: list[Command] = field(default_factory=list)
    is_child: bool = False

    def envp(self) -> list[str]:
        """Environment as ``KEY=value`` strings for a new process."""
        return self.env.to_envp()

    def clear(self) -> None:
        """Drop everything the session holds."""
        self.tokens.clear()
        self.commands.clear()
        self.env = Environment()
        self.cwd = None
        self.input = None