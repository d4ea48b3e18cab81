import pytest

from minishell.textutils import (
    format_args,
    is_in_int_range,
    is_space,
    split_fields,
    trim_spaces,
)


def test_split_fields_drops_empty():
    assert split_fields("/usr/bin::/bin:", ":") == ["/usr/bin", "/bin"]


def test_split_fields_only_separators():
    assert split_fields(":::", ":") == []


def test_split_fields_join_round_trip():
    parts = ["a", "bb", "ccc"]
    assert split_fields(":".join(parts), ":") == parts


@pytest.mark.parametrize("ch", [" ", "\t", "\n", "\v", "\f", "\r"])
def test_is_space_true(ch):
    assert is_space(ch) is True


@pytest.mark.parametrize("ch", ["a", "0", "", "\x00", "  "])
def test_is_space_false(ch):
    assert is_space(ch) is False


def test_trim_spaces():
    assert trim_spaces(" \t 42 \n") == "42"


def test_trim_spaces_all_space():
    assert trim_spaces("   \t") == ""


def test_trim_spaces_keeps_inner():
    assert trim_spaces("  a b  ") == "a b"


@pytest.mark.parametrize(
    "text",
    ["0", "2147483647", "-2147483648", "+12", "", "-", "123abc"],
)
def test_in_range(text):
    assert is_in_int_range(text) is True


@pytest.mark.parametrize(
    "text",
    ["2147483648", "-2147483649", "99999999999", "+2147483648"],
)
def test_out_of_range(text):
    assert is_in_int_range(text) is False


def test_format_args():
    assert format_args(["ls", "-l"]) == "ARGUMENTS = ls, -l, "


def test_format_args_none():
    assert format_args(None) == ""


def test_format_args_empty():
    assert format_args([]) == "ARGUMENTS = "