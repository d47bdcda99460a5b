"""
One turn of play: check the human's move, answer it, check the answer.

play_turn() is the whole game loop as far as the server is concerned. The
client sends the board after the human (X) has moved; the engine (O) replies
with exactly one move, and the client sends the next board when the human
moves again. Nothing is remembered between turns.
"""

import logging
import random
from dataclasses import dataclass

from engine.constants import AI_O, DRAW, EMPTY, MIN_BOARD_SIZE, PLAYER_X
from engine.evaluate import has_won, is_full, outcome
from engine.search import SearchState, get_best_move

_log = logging.getLogger(__name__)


@dataclass
class TurnResult:
    """
    Outcome of a single call to play_turn().

    Attributes:
        board:  The board after the engine's reply (the same list object that
                was passed in).
        winner: "X", "O", "draw", or "" if the game goes on.
        move:   Cell the engine played, or None if it did not move because
                the game was already over.
    """

    board: list[str]
    winner: str
    move: int | None = None


def validate_board(board: list[str], n: int) -> None:
    """
    Check that `board` is a well-formed n×n board.

    Raises:
        ValueError: If n is below 1 or the board length is not n * n.
    """
    if n < MIN_BOARD_SIZE:
        raise ValueError(f"Board size must be at least {MIN_BOARD_SIZE}, got {n}")
    if len(board) != n * n:
        raise ValueError(
            f"Board size and board length do not match: "
            f"{len(board)} cells for a {n}x{n} board"
        )


def play_turn(
    board: list[str],
    n: int,
    rng: random.Random | None = None,
) -> TurnResult:
    """
    Resolve the human's last move and, if the game is still open, reply to it.

    Steps:
        1. If X has a line, X wins and the engine does not move.
        2. If the board is full, the game is a draw and the engine does not move.
        3. Otherwise the move selector is called once and O is written into
           the chosen cell.
        4. The board is then classified for O: "O", "draw", or "".

    Args:
        board: n * n cells, row-major. Mutated in place with the engine's move.
        n:     Board side length.
        rng:   Random source for the N×N heuristic.

    Returns:
        TurnResult with the mutated board, the winner label and the move.

    Raises:
        ValueError: If the board is not n×n.
    """
    validate_board(board, n)

    if has_won(board, PLAYER_X, n):
        return TurnResult(board=board, winner=PLAYER_X)
    if is_full(board):
        return TurnResult(board=board, winner=DRAW)

    state = SearchState()
    move = get_best_move(board, n, rng, state)
    _log.debug("Search n=%d move=%s nodes=%d", n, move, state.node_count)

    if move is not None and board[move] == EMPTY:
        board[move] = AI_O
    else:
        move = None

    return TurnResult(board=board, winner=outcome(board, AI_O, n), move=move)
