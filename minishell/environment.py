"""Ordered store of environment variables."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def _is_ascii_alpha(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_env_char(ch: str, start: bool) -> bool:
    """Return True if ch may appear in a variable name.

    With ``start`` set, only letters and underscore qualify; otherwise
    digits are accepted too.
    """
    if len(ch) != 1:
        return False
    if ch == "_" or _is_ascii_alpha(ch):
        return True
    return not start and _is_ascii_digit(ch)


def split_key(entry: str) -> str:
    """Return the part of a ``KEY=value`` entry before the first '='."""
    key, sep, _ = entry.partition("=")
    if not sep:
        raise ValueError(f"environment entry without '=': {entry!r}")
    return key


def split_value(entry: str) -> str:
    """Return the part of a ``KEY=value`` entry after the first '='."""
    _, sep, value = entry.partition("=")
    if not sep:
        raise ValueError(f"environment entry without '=': {entry!r}")
    return value


class Environment:
    """Shell variables in definition order; a value may be None (exported only)."""

    def __init__(self, entries: Iterable[tuple[str, str | None]] = ()) -> None:
        self._vars: dict[str, str | None] = dict(entries)

    @classmethod
    def from_envp(cls, envp: Iterable[str]) -> Environment:
        """Build an environment from ``KEY=value`` strings."""
        return cls((split_key(entry), split_value(entry)) for entry in envp)

    def __contains__(self, key: object) -> bool:
        return key in self._vars

    def __iter__(self) -> Iterator[str]:
        return iter(self._vars)

    def __len__(self) -> int:
        return len(self._vars)

    def __repr__(self) -> str:
        return f"Environment({list(self._vars.items())!r})"

    def get(self, key: str) -> str | None:
        """Return the value of key, or None if unset or without value."""
        return self._vars.get(key)

    def set(self, key: str, value: str | None) -> None:
        """Define key, keeping its place if it already exists."""
        self._vars[key] = value

    def unset(self, key: str) -> bool:
        """Remove key; return whether it was present."""
        return self._vars.pop(key, _MISSING) is not _MISSING

    def position(self, key: str) -> int:
        """Return the 1-based position of key, or 0 if it is not defined."""
        for index, name in enumerate(self._vars, start=1):
            if name == key:
                return index
        return 0

    def to_envp(self) -> list[str]:
        """Render as ``KEY=value`` strings; keys without value stand alone."""
        return [key if value is None else f"{key}={value}"
                for key, value in self._vars.items()]

    def export_lines(self) -> list[str]:
        """Lines printed by ``export`` without arguments."""
        return [f"export {key}" if value is None else f"export {key}={value}"
                for key, value in self._vars.items()]

    def env_lines(self) -> list[str]:
        """Lines printed by ``env``: only variables that have a value."""
        return [f"{key}={value}" for key, value in self._vars.items()
                if value is not None]


_MISSING = object()