"""
Move selection: exhaustive minimax on 3×3, ordered heuristics everywhere else.

This module defines the public interface that engine.game and the web layer
depend on. get_best_move() takes a board and its side length and returns the
index of the cell the engine wants to play, or None when no cell is free.

Two strategies sit behind it:

1. Minimax (N = 3): the full game tree is at most 9 plies deep, so it is
   searched to the end. Terminal positions score WIN_SCORE - depth for an
   engine win and depth - WIN_SCORE for a human win, which makes the engine
   take the quickest win and drag out a lost game. Ties at the root go to the
   lowest cell index. A per-search transposition table stores the exact score
   of every (position, depth, side) already visited; tic-tac-toe reaches the
   same position through many move orders, and the table collapses the
   ~550k-node tree of the empty board to a few thousand entries without
   changing any score.

2. Heuristic (N != 3): a fixed priority list - win now, block, centre, a
   random corner, any random cell. It is cheap and reasonable but not optimal;
   a full search is out of reach on 4×4 and above without pruning or time
   limits, neither of which is implemented.

Randomness comes from an injected random.Random, so callers (and tests) decide
how it is seeded.
"""

import random
from dataclasses import dataclass, field
from typing import Sequence

from engine.constants import (
    AI_O,
    DRAW_SCORE,
    EMPTY,
    MINIMAX_BOARD_SIZE,
    PLAYER_X,
    WIN_SCORE,
)
from engine.evaluate import empty_cells, has_won, is_full


@dataclass
class SearchState:
    """
    Bookkeeping for a single call to the move selector.

    A fresh instance is created per call unless the caller passes one in to
    read the counters afterwards (the benchmark does this).

    Attributes:
        node_count: Positions visited by minimax, or hypothetical placements
                    tried by the heuristic.
        table:      Transposition table mapping (cells, depth, maximizing) to
                    the exact minimax score of that subtree.
    """

    node_count: int = 0
    table: dict[tuple[tuple[str, ...], int, bool], int] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Exhaustive search (3×3)
# ---------------------------------------------------------------------------


def minimax(
    board: list[str],
    depth: int,
    is_maximizing: bool,
    state: SearchState,
) -> int:
    """
    Score a 3×3 position by searching every continuation to the end.

    The engine (O) maximizes and the human (X) minimizes. Moves are tried in
    ascending cell order by writing the mark into `board`, recursing, and
    clearing the cell again.

    Args:
        board:         The position, modified in place and always restored
                       before returning. Must be owned by the caller.
        depth:         Plies played since the root move (0 right after it).
        is_maximizing: True when it is the engine's turn at this node.
        state:         Node counter and transposition table.

    Returns:
        WIN_SCORE - depth if O has a line, depth - WIN_SCORE if X has a line,
        DRAW_SCORE on a full board, otherwise the minimax value of the best
        continuation for the side to move.
    """
    state.node_count += 1

    key = (tuple(board), depth, is_maximizing)
    cached = state.table.get(key)
    if cached is not None:
        return cached

    n = MINIMAX_BOARD_SIZE
    if has_won(board, AI_O, n):
        score = WIN_SCORE - depth
    elif has_won(board, PLAYER_X, n):
        score = depth - WIN_SCORE
    elif is_full(board):
        score = DRAW_SCORE
    elif is_maximizing:
        score = -WIN_SCORE - 1
        for i in range(len(board)):
            if board[i] == EMPTY:
                board[i] = AI_O
                score = max(score, minimax(board, depth + 1, False, state))
                board[i] = EMPTY
    else:
        score = WIN_SCORE + 1
        for i in range(len(board)):
            if board[i] == EMPTY:
                board[i] = PLAYER_X
                score = min(score, minimax(board, depth + 1, True, state))
                board[i] = EMPTY

    state.table[key] = score
    return score


def find_best_move_minimax(
    board: Sequence[str],
    state: SearchState | None = None,
) -> int | None:
    """
    Return the optimal cell for O on a 3×3 board.

    Each empty cell is tried in ascending order: O is placed there, the
    resulting position is scored with minimax (human to move, depth 0), and
    the cell is cleared. The first cell with the strictly highest score wins,
    so ties resolve to the lowest index.

    Args:
        board: Nine cells, row-major. Not modified; the search runs on a copy.
        state: Optional SearchState to collect node counts into.

    Returns:
        The chosen cell index, or None if the board has no empty cell.

    Raises:
        ValueError: If the board does not have exactly nine cells.
    """
    if len(board) != MINIMAX_BOARD_SIZE * MINIMAX_BOARD_SIZE:
        raise ValueError(f"minimax needs a 3x3 board, got {len(board)} cells")

    if state is None:
        state = SearchState()

    work = list(board)
    best_score = float("-inf")
    best_move = None

    for i in range(len(work)):
        if work[i] != EMPTY:
            continue
        work[i] = AI_O
        score = minimax(work, 0, False, state)
        work[i] = EMPTY

        if score > best_score:
            best_score = score
            best_move = i

    return best_move


# ---------------------------------------------------------------------------
# Heuristic (N×N, N != 3)
# ---------------------------------------------------------------------------


def _first_winning_cell(
    work: list[str],
    mark: str,
    n: int,
    spots: list[int],
    state: SearchState,
) -> int | None:
    """First cell in `spots` that would complete a line for `mark`."""
    for move in spots:
        state.node_count += 1
        work[move] = mark
        won = has_won(work, mark, n)
        work[move] = EMPTY
        if won:
            return move
    return None


def corner_cells(n: int) -> list[int]:
    """The four corner indices of an n×n board: top-left, top-right, bottom-left, bottom-right."""
    return [0, n - 1, n * (n - 1), n * n - 1]


def find_best_move_heuristic(
    board: Sequence[str],
    n: int,
    rng: random.Random | None = None,
    state: SearchState | None = None,
) -> int | None:
    """
    Pick a move for O on an n×n board using a fixed priority order.

    Priorities, each returning the first match:
        1. A cell that gives O a line right now.
        2. A cell that would give X a line on X's next move (block it).
        3. The centre cell, index (n * n) // 2. On even boards this sits just
           below and right of the true centre.
        4. A corner, visiting the four corners in a freshly shuffled order.
        5. Any empty cell, chosen uniformly at random.

    Args:
        board: n * n cells, row-major. Not modified.
        n:     Board side length.
        rng:   Random source for steps 4 and 5. A new OS-seeded
               random.Random() is used when omitted.
        state: Optional SearchState; node_count counts placements tried in
               steps 1 and 2.

    Returns:
        The chosen cell index, or None if the board has no empty cell.
    """
    spots = empty_cells(board)
    if not spots:
        return None

    if rng is None:
        rng = random.Random()
    if state is None:
        state = SearchState()

    work = list(board)

    move = _first_winning_cell(work, AI_O, n, spots, state)
    if move is not None:
        return move

    move = _first_winning_cell(work, PLAYER_X, n, spots, state)
    if move is not None:
        return move

    center = (n * n) // 2
    if board[center] == EMPTY:
        return center

    corners = corner_cells(n)
    rng.shuffle(corners)
    for corner in corners:
        if board[corner] == EMPTY:
            return corner

    return rng.choice(spots)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------


def get_best_move(
    board: Sequence[str],
    n: int,
    rng: random.Random | None = None,
    state: SearchState | None = None,
) -> int | None:
    """
    Return the engine's move for the given board.

    Dispatches on board size: exact minimax for 3×3, the ordered heuristic
    for every other size.

    Args:
        board: n * n cells, row-major. Not modified.
        n:     Board side length.
        rng:   Random source, used only by the heuristic.
        state: Optional SearchState to collect node counts into.

    Returns:
        Index of an empty cell, or None when the board is full.
    """
    if n == MINIMAX_BOARD_SIZE:
        return find_best_move_minimax(board, state)
    return find_best_move_heuristic(board, n, rng, state)
