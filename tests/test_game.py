import io
import itertools

import pytest

import tictactoe.game as G
from tictactoe.board import Cell
from tictactoe.config import Config
from tictactoe.game import parse_move, play, watch

ALL_COORDS = [f"{r} {c}" for r in range(1, 4) for c in range(1, 4)]


@pytest.mark.parametrize("raw,expected", [
    ("1 1", (0, 0)),
    ("3 2", (2, 1)),
    ("  2   3 ", (1, 2)),
    ("2,2", (1, 1)),
    ("", None),
    ("1", None),
    ("1 2 3", None),
    ("a b", None),
    ("0 1", None),
    ("4 1", None),
])
def test_parse_move(raw, expected):
    assert parse_move(raw) == expected


def test_play_reprompts_and_computer_never_loses():
    answers = itertools.chain(["abc", "0 5", "1 1", "1 1"], itertools.cycle(ALL_COORDS))
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        return next(answers)

    out = io.StringIO()
    result = play(Config(timing=False), input_fn=fake_input, out=out)
    text = out.getvalue()

    assert result.winner in (Cell.EMPTY, Cell.O)
    assert result.moves[0] == 0
    assert result.board.get(0) == Cell.X
    assert set(prompts) == {"Move: "}
    assert "Enter a row and a column, each between 1 and 3." in text
    assert "That cell is taken." in text
    assert "After you:" in text
    assert "After the computer:" in text
    assert "took" not in text


def test_play_as_second_player_lets_computer_open(monkeypatch):
    monkeypatch.setattr(G, "best_move", lambda board: board.empty_positions()[0])
    answers = iter(ALL_COORDS)
    out = io.StringIO()
    result = play(Config(human=Cell.O), input_fn=lambda _: next(answers), out=out)
    text = out.getvalue()

    # computer (X) takes 0, the human's "1 1" is refused and "1 2" lands on 1
    assert result.moves[:2] == [0, 1]
    assert result.board.get(0) == Cell.X
    assert result.board.get(1) == Cell.O
    assert text.index("After the computer:") < text.index("After you:")
    assert "You took" in text
    assert "The computer took" in text


def test_play_propagates_end_of_input():
    def closed(_prompt):
        raise EOFError

    with pytest.raises(EOFError):
        play(Config(timing=False), input_fn=closed, out=io.StringIO())


def test_watch_plays_to_a_draw():
    out = io.StringIO()
    result = watch(Config(), out=out)
    text = out.getvalue()

    assert result.is_draw
    assert result.board.is_full()
    assert len(result.moves) == 9
    assert sorted(result.moves) == list(range(9))
    assert text.rstrip().splitlines()[-2] == "Draw."
    assert text.rstrip().splitlines()[-1].startswith("Took ")
    # initial board plus one board per move
    assert text.count("_ _ _\n_ _ _\n_ _ _") == 1
