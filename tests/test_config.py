import pytest

from tictactoe.board import Cell
from tictactoe.config import Config


def test_defaults_without_env(monkeypatch):
    monkeypatch.delenv("TTT_DEBUG", raising=False)
    monkeypatch.delenv("TTT_HUMAN", raising=False)
    cfg = Config.from_env()
    assert cfg == Config()
    assert cfg.human == Cell.X
    assert cfg.computer == Cell.O
    assert cfg.timing is True


@pytest.mark.parametrize("value,expected", [("1", True), ("TRUE", True), ("on", True), ("0", False), ("", False)])
def test_debug_from_env(monkeypatch, value, expected):
    monkeypatch.setenv("TTT_DEBUG", value)
    monkeypatch.delenv("TTT_HUMAN", raising=False)
    assert Config.from_env().debug is expected


def test_human_from_env_and_override(monkeypatch):
    monkeypatch.setenv("TTT_HUMAN", "o")
    cfg = Config.from_env()
    assert cfg.human == Cell.O
    assert cfg.computer == Cell.X
    cfg = cfg.override(human="X", timing=False)
    assert cfg.human == Cell.X
    assert cfg.timing is False
    # unset flags keep the environment's values
    assert cfg.override(debug=False, timing=None) == cfg


def test_bad_human_in_env(monkeypatch):
    monkeypatch.setenv("TTT_HUMAN", "Z")
    with pytest.raises(ValueError):
        Config.from_env()
