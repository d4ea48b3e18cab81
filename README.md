# minishell

The execution side of a small POSIX-style shell, in plain Python with no
third-party dependencies. It takes command lines that are already split
into commands and words and runs them. It provides:

- `minishell.environment`: `Environment`, an ordered store of variables that
  can be rendered as `KEY=value` strings for child processes.
- `minishell.expansion`: `expand()` for `$NAME` and `$?` with quote removal.
  Single quotes stop expansion and double quotes do not.
- `minishell.builtins`: `cd`, `echo`, `env`, `export`, `pwd`, `unset`,
  `exit`, `:` and `!`.
- `minishell.redirections`: `<`, `>`, `>>` and heredocs.
- `minishell.executor`: pipelines, `PATH` lookup and exit statuses.
- `minishell.structures`: the data types passed in (`TokenType`, `Token`,
  `Redirection`, `Command`).
- `minishell.state`: `Shell`, the state of one session.
- `minishell.errors`: error codes and their messages.

## Environment

```python
from minishell.environment import Environment

env = Environment.from_envp(["HOME=/home/user", "PATH=/usr/bin:/bin"])
env.set("EDITOR", "vi")
print(env.get("HOME"))        # /home/user
print(env.position("PATH"))   # 2
print(env.to_envp())          # ['HOME=/home/user', 'PATH=/usr/bin:/bin', 'EDITOR=vi']
env.unset("EDITOR")
```

A variable can be set with the value `None`, which means it is exported
but has no value. Such a variable:

- appears alone, as `KEY`, in `to_envp()`;
- is listed by `export_lines()`;
- is left out of `env_lines()`.

`Environment.from_envp` raises `ValueError` for an entry without `=`.

## Expansion

```python
from minishell.environment import Environment
from minishell.expansion import expand
from minishell.state import Shell

shell = Shell(env=Environment.from_envp(["USER=guest"]), status=3)
expand('"$USER" said $?', shell)   # 'guest said 3'
expand("'$USER'", shell)           # "'$USER'"
```

- `$?` becomes the shell's last status.
- A `$` that is not followed by a valid name is kept as it is.
- A variable that is not set ends the expansion of that word. The text after
  it is dropped.
- A word that begins with a single quote and contains `$` keeps its outer
  quotes.

`toggle_quote()` follows the quoting state one character at a time.
`expanded_length()` estimates how long a word will be after expansion.

## Builtins

`is_builtin(args)` tells you whether a word list names a builtin.
`run_builtin(shell, args)` runs it and returns its status. Each builtin is
also available on its own as `builtin_<name>(shell, args)`, plus
`builtin_negate`.

`exit` does not end the Python interpreter. It raises `ShellExit`, and the
code to stop with is in `.code`. There is one exception: when `exit` gets
more than one argument and the first is a valid number, it prints
`too many arguments`, returns 1, and the shell keeps running.

## Redirections and heredocs

`read_heredoc(redirection, shell, read_line)` collects lines until it reads
the delimiter:

- `read_line` is called with the prompt and returns `None` at end of input.
  Without it, `input()` is used.
- The lines are expanded when `redirection.expand` is true.
- A `KeyboardInterrupt` drops what was read, sets the status to 130 and
  returns `False`.

`apply_redirections(command, stdin, stdout)` opens each target in order and
returns the resulting streams. A target that cannot be opened raises
`RedirectionError`.

`clear_heredocs(commands)` drops the collected heredoc content.

## Running commands

```python
from minishell.environment import Environment
from minishell.executor import execute
from minishell.state import Shell
from minishell.structures import Command, Redirection, TokenType

shell = Shell(env=Environment.from_envp(["PATH=/usr/bin:/bin"]))
commands = [
    Command(args=["echo", "hello"]),
    Command(args=["tr", "a-z", "A-Z"],
            redirections=[Redirection("out.txt", TokenType.REDIR_OUT)]),
]
status = execute(commands, shell)   # out.txt now holds "HELLO"
```

How `execute(commands, shell)` runs a command line:

- **A single builtin** runs inside the shell and changes its state. A lone
  `exit` raises `ShellExit`.
- **In a pipeline**, each builtin runs on a copy of the session. Other
  commands are started as processes through `PATH`.
- **The final status** is stored on the shell and returned. A process
  killed by signal N gives the status 128+N (`status_from_returncode`).
- **Signal messages:** after a pipeline, `signal_message` prints a newline
  for SIGINT or `Quit (core dumped)` for SIGQUIT.
- **Lookup failures** print `command not found: NAME` or
  `Permission denied: NAME` and give the status 127 or 126.
- **Interrupted sessions:** nothing runs while the last status is 130.

`find_command(name, envp)` and `resolve_path(args, envp)` expose the `PATH`
lookup.

## Errors

`minishell.errors` defines the following:

- `ErrorCode`, the kinds of failure.
- `error_message(code)`, which returns the text for a code, or
  `Unknown error`.
- `handle_error(code, custom_message)`, which prints an error line.
- `ShellError`, an exception that carries a code and a message.

## What this package does not do

- It has no lexer or parser. Commands must be built as `Command` objects.
- It has no prompt, no line-editing loop and no history.
- It installs no command to run. It is a library for building such a shell.