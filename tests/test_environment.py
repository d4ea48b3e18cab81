import pytest

from minishell.environment import Environment, is_env_char, split_key, split_value


def test_is_env_char_start_rejects_digit():
    assert is_env_char("1", True) is False
    assert is_env_char("1", False) is True


@pytest.mark.parametrize("ch", ["a", "Z", "_"])
def test_is_env_char_accepts_letters_and_underscore(ch):
    assert is_env_char(ch, True) is True
    assert is_env_char(ch, False) is True


@pytest.mark.parametrize("ch", ["", "$", "-", "?", " "])
def test_is_env_char_rejects_others(ch):
    assert is_env_char(ch, False) is False


def test_split_key_and_value_on_first_equals():
    assert split_key("PATH=/bin=x") == "PATH"
    assert split_value("PATH=/bin=x") == "/bin=x"


def test_split_value_empty():
    assert split_value("EMPTY=") == ""


def test_split_without_equals_raises():
    with pytest.raises(ValueError):
        split_key("NOEQ")
    with pytest.raises(ValueError):
        split_value("NOEQ")


def test_from_envp_round_trip():
    envp = ["HOME=/home/user", "SHELL=/bin/sh", "X=a=b"]
    assert Environment.from_envp(envp).to_envp() == envp


def test_from_envp_empty():
    env = Environment.from_envp([])
    assert len(env) == 0
    assert env.to_envp() == []


def test_get_and_set():
    env = Environment.from_envp(["A=1"])
    assert env.get("A") == "1"
    assert env.get("B") is None
    env.set("B", "2")
    assert env.get("B") == "2"
    assert "B" in env


def test_set_existing_keeps_position():
    env = Environment.from_envp(["A=1", "B=2", "C=3"])
    env.set("B", "new")
    assert list(env) == ["A", "B", "C"]
    assert env.get("B") == "new"


def test_position_is_one_based():
    env = Environment.from_envp(["A=1", "B=2"])
    assert env.position("A") == 1
    assert env.position("B") == 2
    assert env.position("C") == 0


@pytest.mark.parametrize("key", ["A", "B", "C"])
def test_unset_first_middle_last(key):
    env = Environment.from_envp(["A=1", "B=2", "C=3"])
    assert env.unset(key) is True
    assert key not in env
    assert len(env) == 2
    assert env.position(key) == 0


def test_unset_missing():
    env = Environment.from_envp(["A=1"])
    assert env.unset("Z") is False
    assert env.to_envp() == ["A=1"]


def test_valueless_entry_rendering():
    env = Environment.from_envp(["A=1"])
    env.set("FLAG", None)
    assert env.to_envp() == ["A=1", "FLAG"]
    assert env.env_lines() == ["A=1"]
    assert env.export_lines() == ["export A=1", "export FLAG"]