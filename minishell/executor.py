"""Running command lines: lone builtins in place, pipelines as processes."""

from __future__ import annotations

import dataclasses
import io
import os
import signal
import subprocess
import sys
import tempfile
import threading
from collections.abc import Iterator, Sequence
from contextlib import contextmanager, redirect_stdout
from dataclasses import dataclass
from typing import Any

from minishell.builtins import ShellExit, is_builtin, run_builtin
from minishell.environment import Environment
from minishell.redirections import (
    RedirectionError,
    apply_redirections,
    clear_heredocs,
)
from minishell.state import Shell
from minishell.structures import Command
from minishell.textutils import split_fields

NOT_FOUND_STATUS = 127
NOT_EXECUTABLE_STATUS = 126
INTERRUPTED_STATUS = 128 + int(signal.SIGINT)
QUIT_STATUS = 128 + int(signal.SIGQUIT)


def find_command(name: str, envp: Sequence[str]) -> str | None:
    """Return the first existing ``dir/name`` along PATH, or None."""
    if not name:
        return None
    path_value = next((entry[5:] for entry in envp
                       if entry.startswith("PATH=")), None)
    if path_value is None:
        return None
    for directory in split_fields(path_value, ":"):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.F_OK):
            return candidate
    return None


def resolve_path(args: Sequence[str], envp: Sequence[str]) -> str | None:
    """Return the program to run for a command, or None."""
    name = args[0]
    if "/" in name:
        return name if os.access(name, os.F_OK | os.X_OK) else None
    if not envp:
        return None
    return find_command(name, envp)


def status_from_returncode(returncode: int) -> int:
    """Turn a process return code into a shell status (128+N for signal N)."""
    if returncode < 0:
        return 128 - returncode
    return returncode


def signal_message(status: int) -> str:
    """Text printed after a pipeline ended by SIGINT or SIGQUIT."""
    if status == INTERRUPTED_STATUS:
        return "\n"
    if status == QUIT_STATUS:
        return "Quit (core dumped)\n"
    return ""


def _command_error(name: str, path: str | None) -> tuple[str, int]:
    if "/" in name:
        return f"No such file or directory : {name}\n", NOT_FOUND_STATUS
    if path is None:
        return f"command not found: {name}\n", NOT_FOUND_STATUS
    if os.access(path, os.F_OK) and not os.access(path, os.X_OK):
        return f"Permission denied: {name}\n", NOT_EXECUTABLE_STATUS
    return f"{name}\n", NOT_FOUND_STATUS


@dataclass
class _Job:
    process: subprocess.Popen | None = None
    status: int = 0

    def wait(self) -> int:
        if self.process is None:
            return self.status
        return status_from_returncode(self.process.wait())


def _release(stream: Any) -> None:
    close = getattr(stream, "close", None)
    if close is not None:
        close()


def _is_pipe(stream: Any) -> bool:
    return isinstance(stream, int) and stream == subprocess.PIPE


@contextmanager
def _text_stdout(binary: Any) -> Iterator[None]:
    wrapper = io.TextIOWrapper(binary, encoding="utf-8", write_through=True)
    try:
        with redirect_stdout(wrapper):
            yield
    finally:
        wrapper.flush()
        wrapper.detach()


@contextmanager
def _ignore_parent_signals() -> Iterator[None]:
    if threading.current_thread() is not threading.main_thread():
        yield
        return
    names = ("SIGINT", "SIGQUIT", "SIGTSTP")
    signums = [getattr(signal, name) for name in names if hasattr(signal, name)]
    saved = {signum: signal.getsignal(signum) for signum in signums}
    for signum in signums:
        signal.signal(signum, signal.SIG_IGN)
    try:
        yield
    finally:
        for signum, handler in saved.items():
            if handler is not None:
                signal.signal(signum, handler)


def _child_signals() -> None:
    signal.signal(signal.SIGINT, signal.SIG_DFL)
    signal.signal(signal.SIGQUIT, signal.SIG_DFL)


def _call_builtin(shell: Shell, args: Sequence[str]) -> int:
    try:
        return run_builtin(shell, args)
    except ShellExit as exc:
        return exc.code


def _builtin_job(shell: Shell, command: Command, stdout: Any) -> tuple[_Job, Any]:
    child = dataclasses.replace(
        shell,
        env=Environment((key, shell.env.get(key)) for key in shell.env),
        is_child=True,
    )
    if stdout is None:
        return _Job(status=_call_builtin(child, command.args)), subprocess.DEVNULL
    buffer = tempfile.TemporaryFile() if _is_pipe(stdout) else None
    target = buffer if buffer is not None else stdout
    with _text_stdout(target):
        status = _call_builtin(child, command.args)
    if buffer is not None:
        buffer.seek(0)
        return _Job(status=status), buffer
    return _Job(status=status), subprocess.DEVNULL


def _failed(name: str, path: str | None) -> tuple[_Job, Any]:
    message, status = _command_error(name, path)
    sys.stderr.write(message)
    return _Job(status=status), subprocess.DEVNULL


def _spawn(command: Command, stdin: Any, stdout: Any, envp: Sequence[str],
           env: dict[str, str]) -> tuple[_Job, Any]:
    name = command.args[0]
    path = resolve_path(command.args, envp)
    if path is None:
        return _failed(name, None)
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        process = subprocess.Popen(
            command.args, executable=path, stdin=stdin, stdout=stdout,
            env=env, preexec_fn=_child_signals,
        )
    except OSError:
        return _failed(name, path)
    following = process.stdout if _is_pipe(stdout) else subprocess.DEVNULL
    return _Job(process=process), following


def _start(command: Command, shell: Shell, stdin: Any, stdout: Any,
           envp: Sequence[str], env: dict[str, str]) -> tuple[_Job, Any]:
    if not command.args or not command.args[0]:
        return _Job(status=0), subprocess.DEVNULL
    if is_builtin(command.args):
        return _builtin_job(shell, command, stdout)
    return _spawn(command, stdin, stdout, envp, env)


def _run_pipeline(commands: Sequence[Command], shell: Shell) -> None:
    envp = shell.envp()
    env = {key: value for key in shell.env
           if (value := shell.env.get(key)) is not None}
    jobs: list[_Job] = []
    upstream: Any = None
    last = len(commands) - 1
    for index, command in enumerate(commands):
        default_out = subprocess.PIPE if index < last else None
        try:
            stdin, stdout = apply_redirections(command, upstream, default_out)
        except RedirectionError as exc:
            sys.stderr.write(f"{exc}\n")
            jobs.append(_Job(status=1))
            _release(upstream)
            upstream = subprocess.DEVNULL
            continue
        try:
            job, following = _start(command, shell, stdin, stdout, envp, env)
        finally:
            _release(upstream)
            _release(stdin)
            _release(stdout)
        jobs.append(job)
        upstream = following
    _release(upstream)
    for job in jobs:
        shell.status = job.wait()


def _run_builtin_here(command: Command, shell: Shell) -> None:
    try:
        stdin, stdout = apply_redirections(command, None, None)
    except RedirectionError as exc:
        sys.stderr.write(f"{exc}\n")
        shell.status = 1
        return
    try:
        if stdout is None:
            run_builtin(shell, command.args)
        else:
            with _text_stdout(stdout):
                run_builtin(shell, command.args)
    finally:
        _release(stdin)
        _release(stdout)


def execute(commands: Sequence[Command], shell: Shell) -> int:
    """Run a pipeline and return the resulting shell status.

    A single builtin runs inside the shell itself; anything else runs with
    each builtin in an isolated copy of the session. Nothing runs while
    the last status records an interrupt (130). ``exit`` run alone raises
    ShellExit.
    """
    if not commands or shell.status == INTERRUPTED_STATUS:
        return shell.status
    with _ignore_parent_signals():
        if len(commands) == 1 and is_builtin(commands[0].args):
            try:
                _run_builtin_here(commands[0], shell)
            finally:
                clear_heredocs(commands)
            return shell.status
        try:
            _run_pipeline(commands, shell)
        finally:
            clear_heredocs(commands)
    sys.stdout.write(signal_message(shell.status))
    return shell.status