"""Tests for play_turn(), the single-turn orchestration."""

import random

import pytest

from engine.game import TurnResult, play_turn, validate_board

_ = ""


def _fail_selector(*args, **kwargs):
    raise AssertionError("move selector should not be called")


def test_block_leaves_game_open():
    board = ["X", "X", _, _, _, _, _, _, _]
    result = play_turn(board, 3)
    assert result.move == 2
    assert result.board[2] == "O"
    assert result.winner == ""


def test_engine_completes_line():
    board = ["O", "O", _, _, _, _, _, _, _]
    result = play_turn(board, 3)
    assert result == TurnResult(
        board=["O", "O", "O", _, _, _, _, _, _], winner="O", move=2
    )


def test_board_is_mutated_in_place():
    board = ["X", _, _, _, _, _, _, _, _]
    result = play_turn(board, 3)
    assert result.board is board
    assert board.count("O") == 1


def test_human_win_stops_engine(monkeypatch):
    monkeypatch.setattr("engine.game.get_best_move", _fail_selector)
    board = ["X", "X", "X", "O", "O", _, _, _, _]
    result = play_turn(board, 3)
    assert result.winner == "X"
    assert result.move is None
    assert board == ["X", "X", "X", "O", "O", _, _, _, _]


@pytest.mark.parametrize(
    "board, n",
    [
        (["X", "O", "X", "X", "O", "O", "O", "X", "X"], 3),
        (["X", "O", "O", "X"] * 2 + ["O", "X", "X", "O"] * 2, 4),
    ],
)
def test_full_board_is_draw_without_search(monkeypatch, board, n):
    monkeypatch.setattr("engine.game.get_best_move", _fail_selector)
    snapshot = list(board)
    result = play_turn(board, n)
    assert result.winner == "draw"
    assert result.move is None
    assert board == snapshot


def test_single_cell_human_win():
    assert play_turn(["X"], 1).winner == "X"


def test_single_cell_engine_win():
    result = play_turn([_], 1)
    assert result.board == ["O"]
    assert result.winner == "O"


def test_engine_fills_last_cell_for_draw():
    board = [
        "X", "O", "X",
        "X", "O", "O",
        "O", "X", _,
    ]
    result = play_turn(board, 3)
    assert result.move == 8
    assert result.winner == "draw"


def test_empty_4x4_takes_center():
    result = play_turn([_] * 16, 4, random.Random(0))
    assert result.move == 8
    assert result.winner == ""


def test_selector_called_once(monkeypatch):
    calls = []

    def _selector(board, n, rng=None, state=None):
        calls.append(n)
        return 4

    monkeypatch.setattr("engine.game.get_best_move", _selector)
    play_turn([_] * 9, 3)
    assert calls == [3]


def test_occupied_move_is_ignored(monkeypatch):
    monkeypatch.setattr("engine.game.get_best_move", lambda board, n, rng=None, state=None: 0)
    board = ["X", _, _, _, _, _, _, _, _]
    result = play_turn(board, 3)
    assert result.move is None
    assert board == ["X", _, _, _, _, _, _, _, _]


@pytest.mark.parametrize(
    "board, n",
    [
        ([_] * 8, 3),
        ([_] * 10, 3),
        ([_] * 9, 4),
        ([], 0),
        ([_], -1),
    ],
)
def test_rejects_mismatched_board(board, n):
    with pytest.raises(ValueError):
        validate_board(board, n)
    with pytest.raises(ValueError):
        play_turn(board, n)
