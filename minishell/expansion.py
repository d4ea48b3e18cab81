"""Variable expansion and quote removal for words."""

from __future__ import annotations

from collections.abc import Iterator

from minishell.environment import is_env_char
from minishell.state import Shell

NO_QUOTE = 0
SINGLE_QUOTE = 1
DOUBLE_QUOTE = 2


def toggle_quote(quote: str, state: int) -> int:
    """Return the quoting state after meeting a quote character."""
    if state == NO_QUOTE:
        if quote == "'":
            return SINGLE_QUOTE
        if quote == '"':
            return DOUBLE_QUOTE
    elif (state == SINGLE_QUOTE and quote == "'") or (
            state == DOUBLE_QUOTE and quote == '"'):
        return NO_QUOTE
    return state


def _name_end(text: str, start: int) -> int:
    end = start
    while end < len(text) and is_env_char(text[end], False):
        end += 1
    return end


def _segments(text: str, shell: Shell) -> Iterator[tuple[str, bool]]:
    """Yield output pieces; the flag is False for an unset variable."""
    state = NO_QUOTE
    i = 0
    while i < len(text):
        ch = text[i]
        if (ch == "'" and state != DOUBLE_QUOTE) or (
                ch == '"' and state != SINGLE_QUOTE):
            state = toggle_quote(ch, state)
            i += 1
        elif ch == "$" and state != SINGLE_QUOTE:
            following = text[i + 1:i + 2]
            if following == "?":
                yield str(shell.status), True
                i += 2
            elif not is_env_char(following, True):
                yield "$", True
                i += 1
            else:
                end = _name_end(text, i + 1)
                value = shell.env.get(text[i + 1:end])
                yield ("" if value is None else value), value is not None
                i = end
        else:
            yield ch, True
            i += 1


def _expand_plain(text: str, shell: Shell) -> str:
    pieces = []
    for piece, defined in _segments(text, shell):
        if not defined:
            # An unset variable ends the expansion of the word.
            break
        pieces.append(piece)
    return "".join(pieces)


def expand(text: str, shell: Shell) -> str:
    """Expand variables and remove quotes in one word.

    A word that opens with a single quote and contains '$' keeps its
    surrounding quotes and has the quoted part expanded; anything after
    the closing quote is dropped.
    """
    if text == "$":
        return "$"
    if text.startswith("'") and "$" in text:
        end = text.find("'", 1)
        inner = text[1:] if end == -1 else text[1:end]
        return "'" + _expand_plain(inner, shell) + "'"
    return _expand_plain(text, shell)


def expanded_length(text: str, shell: Shell) -> int:
    """Estimate the length of a word after expansion and quote removal."""
    extra = 2 if text.startswith("'") and "$" in text[1:] else 0
    return extra + sum(len(piece) for piece, _ in _segments(text, shell))