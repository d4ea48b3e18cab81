"""Commands the shell runs itself instead of starting a program."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Sequence

from minishell.expansion import expand
from minishell.state import Shell
from minishell.textutils import is_in_int_range, is_space, trim_spaces

BUILTIN_NAMES = frozenset(
    {"cd", "echo", "env", "exit", "export", "pwd", "unset", ":", "!"}
)


class ShellExit(Exception):
    """Raised by ``exit``: the shell should stop with ``code``."""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"exit {code}")


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_alpha(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def is_builtin(args: Sequence[str] | None) -> bool:
    """Return True if the command word names a builtin."""
    return bool(args) and args[0] in BUILTIN_NAMES


def is_echo_flag(text: str) -> bool:
    """Return True for ``-n``, ``-nn`` and so on."""
    return len(text) > 1 and text[0] == "-" and all(ch == "n" for ch in text[1:])


def is_valid_identifier(text: str) -> bool:
    """Check the name part of an ``export`` argument."""
    if not text or not (_is_alpha(text[0]) or text[0] == "_"):
        return False
    name = text.partition("=")[0]
    return all(_is_alpha(ch) or _is_digit(ch) or ch in "_-" for ch in name)


def is_valid_exit(text: str) -> bool:
    """Check that ``text`` is a signed integer fitting a 32-bit int."""
    text = trim_spaces(text)
    i = 1 if text[:1] in ("-", "+") else 0
    if i >= len(text) or not _is_digit(text[i]):
        return False
    while i < len(text) and _is_digit(text[i]):
        i += 1
    if not all(is_space(ch) for ch in text[i:]):
        return False
    return is_in_int_range(text)


def _out(line: str) -> None:
    sys.stdout.write(line)


def _chdir_fail(path: str) -> int:
    _out(f"minishell: cd: {path} : No such file or directory\n")
    return 1


def builtin_cd(shell: Shell, args: Sequence[str]) -> int:
    """Change the working directory, to $HOME without an argument."""
    shell.status = 1
    if len(args) < 2:
        if not shell.env.position("HOME"):
            _out("minishell: cd: HOME not set\n")
            return shell.status
        home = expand("$HOME", shell)
        try:
            os.chdir(home)
        except OSError:
            return _chdir_fail(home)
        shell.status = 0
        return 0
    if len(args) > 2:
        _out("minishell: cd: too many arguments\n")
        return shell.status
    try:
        os.chdir(args[1])
    except OSError:
        return _chdir_fail(args[1])
    shell.status = 0
    return shell.status


def builtin_echo(shell: Shell, args: Sequence[str]) -> int:
    """Print the arguments; leading ``-n`` flags drop the newline."""
    shell.status = 0
    words = list(args[1:])
    newline = True
    while words and is_echo_flag(words[0]):
        newline = False
        words.pop(0)
    _out(" ".join(words) + ("\n" if newline else ""))
    return shell.status


def builtin_env(shell: Shell, args: Sequence[str]) -> int:
    """Print variables that have a value; options are rejected."""
    shell.status = 0
    for arg in args[1:]:
        if arg.startswith("-"):
            sys.stderr.write(f"env: {arg}: Invalid option\nusage: env\n")
            shell.status = 1
            return shell.status
    for line in shell.env.env_lines():
        _out(line + "\n")
    return shell.status


def _export_one(shell: Shell, arg: str) -> None:
    if "=" in arg:
        key, _, value = arg.partition("=")
        shell.env.set(key, value)
    elif arg not in shell.env:
        shell.env.set(arg, None)


def builtin_export(shell: Shell, args: Sequence[str]) -> int:
    """Define variables, or list them all without arguments."""
    shell.status = 0
    if len(args) < 2:
        for line in shell.env.export_lines():
            _out(line + "\n")
        return shell.status
    rest = list(args[1:])
    while rest:
        arg = rest.pop(0)
        # "NAME=" followed by a separate word takes that word as its value.
        if arg.endswith("=") and rest:
            arg += rest.pop(0)
        if not is_valid_identifier(arg):
            _out(f"bash: export: `{arg}': not a valid identifier\n")
            shell.status = 1
        else:
            _export_one(shell, arg)
    return shell.status


def builtin_pwd(shell: Shell, args: Sequence[str]) -> int:
    """Print the working directory."""
    shell.status = 0
    try:
        cwd = os.getcwd()
    except OSError:
        return 0
    _out(cwd + "\n")
    return shell.status


def builtin_unset(shell: Shell, args: Sequence[str]) -> int:
    """Remove the named variables."""
    shell.status = 0
    for name in args[1:]:
        shell.env.unset(name)
    return shell.status


def builtin_exit(shell: Shell, args: Sequence[str]) -> int:
    """Leave the shell by raising ShellExit.

    With more than one valid argument nothing is left: the status is 1
    and the shell keeps running.
    """
    shell.status = 0
    _out("exit\n")
    if len(args) < 2:
        raise ShellExit(shell.status)
    text = trim_spaces(args[1])
    if not is_valid_exit(text):
        _out(f"minishell: exit: {text}: numeric argument required\n")
        shell.status = 2
        raise ShellExit(shell.status)
    if len(args) > 2:
        _out("minishell: exit: too many arguments\n")
        shell.status = 1
        return 1
    shell.status = int(text)
    raise ShellExit(shell.status % 256)


def builtin_colon(shell: Shell, args: Sequence[str]) -> int:
    """Do nothing, successfully."""
    shell.status = 0
    return 0


def builtin_negate(shell: Shell, args: Sequence[str]) -> int:
    """Flip the last status between success and failure."""
    shell.status = 1 if shell.status == 0 else 0
    return shell.status


_DISPATCH: dict[str, Callable[[Shell, Sequence[str]], int]] = {
    "cd": builtin_cd,
    "echo": builtin_echo,
    "env": builtin_env,
    "exit": builtin_exit,
    "export": builtin_export,
    "pwd": builtin_pwd,
    "unset": builtin_unset,
    ":": builtin_colon,
}


def run_builtin(shell: Shell, args: Sequence[str]) -> int:
    """Run a builtin and return its status; 0 for anything else.

    A bare ``!`` reports failure without touching the shell's status.
    """
    if not args:
        return 0
    if args[0] == "!":
        return 1
    handler = _DISPATCH.get(args[0])
    if handler is None:
        return 0
    return handler(shell, args)