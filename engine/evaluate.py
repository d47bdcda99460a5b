"""
Win/draw evaluation for N×N boards.

A board is a flat, row-major list of N² cell strings. Cell (row, col) lives at
index row * N + col. A player wins by filling a full row, a full column, or
either of the two long diagonals with their mark; shorter runs never count,
so on a 5×5 board a player needs all five cells of a line.

The line table for each board size is built once and cached. The same table
serves the exhaustive 3×3 search and the N×N heuristic, so both strategies
agree on what a win is.

Every function here is a pure predicate over the board: nothing is mutated.
"""

from functools import lru_cache
from typing import Sequence

from engine.constants import DRAW, EMPTY, NO_WINNER


@lru_cache(maxsize=None)
def winning_lines(n: int) -> tuple[tuple[int, ...], ...]:
    """
    Return every winning line of an n×n board as tuples of cell indices.

    Order: the n rows top to bottom, the n columns left to right, then the
    main diagonal and the anti-diagonal. A 3×3 board therefore has 8 lines
    and a 4×4 board has 10.

    Args:
        n: Board side length (n >= 1).

    Returns:
        Tuple of 2n + 2 index tuples, each of length n.

    Example:
        >>> winning_lines(3)[0]
        (0, 1, 2)
        >>> winning_lines(3)[-1]
        (2, 4, 6)
    """
    rows = [tuple(r * n + c for c in range(n)) for r in range(n)]
    cols = [tuple(r * n + c for r in range(n)) for c in range(n)]
    diag = tuple(i * n + i for i in range(n))
    anti = tuple(i * n + (n - 1 - i) for i in range(n))
    return tuple(rows + cols + [diag, anti])


def has_won(board: Sequence[str], mark: str, n: int) -> bool:
    """
    Return True if `mark` occupies every cell of at least one line.

    Args:
        board: Flat row-major board of length n * n. Not modified.
        mark:  The mark to test for, usually "X" or "O".
        n:     Board side length.

    Returns:
        True iff some row, column, or long diagonal is entirely `mark`.
    """
    return any(
        all(board[i] == mark for i in line)
        for line in winning_lines(n)
    )


def is_full(board: Sequence[str]) -> bool:
    """Return True if no cell is empty. A zero-length board counts as full."""
    return EMPTY not in board


def empty_cells(board: Sequence[str]) -> list[int]:
    """Indices of the empty cells in scan order (low to high)."""
    return [i for i, cell in enumerate(board) if cell == EMPTY]


def outcome(board: Sequence[str], mark: str, n: int) -> str:
    """
    Classify the board from the point of view of the player who just moved.

    Args:
        board: Flat row-major board.
        mark:  The mark of the player who moved last.
        n:     Board side length.

    Returns:
        `mark` if that player has a line, "draw" if the board is full,
        otherwise "" (game continues).
    """
    if has_won(board, mark, n):
        return mark
    if is_full(board):
        return DRAW
    return NO_WINNER
