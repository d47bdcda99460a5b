"""Smoke tests for the benchmark helper."""

from tools.bench import POSITIONS, run_position


def test_positions_are_well_formed():
    for label, n, board in POSITIONS:
        assert len(board) == n * n, label


def test_run_position_reports_move_and_nodes():
    r = run_position("Block row", 3, ["X", "X", "", "", "O", "", "", "", ""])
    assert r["move"] == "2"
    assert r["size"] == 3
    assert r["nodes"] > 0
    assert r["time_ms"] >= 0


def test_run_position_is_deterministic_on_large_boards():
    board = [""] * 16
    board[8] = "X"
    first = run_position("Corner 4x4", 4, board)
    second = run_position("Corner 4x4", 4, board)
    assert first["move"] == second["move"]
    assert first["move"] in {"0", "3", "12", "15"}
