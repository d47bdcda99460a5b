"""
Engine constants: marks, outcome labels, terminal scores, and board limits.

All literal values shared by the evaluator, the search, and the web layer are
defined here. The mark strings double as the JSON wire values, so changing
them changes the API.
"""

# ---------------------------------------------------------------------------
# Marks
# ---------------------------------------------------------------------------
# The human always plays X and the engine always plays O. An empty cell is the
# empty string, matching what the browser client sends.

PLAYER_X: str = "X"
AI_O: str = "O"
EMPTY: str = ""

# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------
# The winner field of a GameState is one of the two marks, DRAW, or NO_WINNER
# while the game is still running.

DRAW: str = "draw"
NO_WINNER: str = ""

# ---------------------------------------------------------------------------
# Exhaustive search
# ---------------------------------------------------------------------------
# Terminal scores are offset by search depth: an AI win scores
# WIN_SCORE - depth and a human win scores depth - WIN_SCORE, so faster wins
# and slower losses rank higher. A full board with no line scores DRAW_SCORE.

WIN_SCORE: int = 10
DRAW_SCORE: int = 0

# Only the classic board is searched exhaustively; every other size goes
# through the ordered heuristic.
MINIMAX_BOARD_SIZE: int = 3

# ---------------------------------------------------------------------------
# Board limits
# ---------------------------------------------------------------------------

DEFAULT_BOARD_SIZE: int = 3
MIN_BOARD_SIZE: int = 1
