"""Small string helpers used by the shell."""

from __future__ import annotations

from collections.abc import Iterable

_SPACES = " \t\n\v\f\r"
_INT_MIN = -(2 ** 31)
_INT_MAX = 2 ** 31 - 1


def split_fields(text: str, sep: str) -> list[str]:
    """Split on a separator character, dropping empty fields."""
    return [part for part in text.split(sep) if part]


def is_space(ch: str) -> bool:
    """Return True for a single ASCII whitespace character."""
    return len(ch) == 1 and ch in _SPACES


def trim_spaces(text: str) -> str:
    """Strip ASCII whitespace from both ends."""
    return text.strip(_SPACES)


def is_in_int_range(text: str) -> bool:
    """Check that the leading signed number fits a 32-bit signed int.

    Only the sign and the run of digits after it are considered; anything
    following them is ignored, and no digits at all counts as in range.
    """
    sign = 1
    rest = text
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    digits = ""
    for ch in rest:
        if not ("0" <= ch <= "9"):
            break
        digits += ch
    if not digits:
        return True
    value = sign * int(digits)
    return _INT_MIN <= value <= _INT_MAX


def format_args(args: Iterable[str] | None) -> str:
    """Render arguments as a debugging line."""
    if args is None:
        return ""
    return "ARGUMENTS = " + "".join(f"{arg}, " for arg in args)