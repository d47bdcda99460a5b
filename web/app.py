"""
FastAPI web application for the tic-tac-toe engine.

Exposes a single endpoint, POST /play, which accepts the board after the
human's move and returns it with the engine's reply and the game outcome.
OPTIONS /play answers CORS preflight requests for browser front ends served
from another origin.

Architecture notes:
- Sync endpoint (not async): FastAPI runs sync handlers in a thread pool,
  which suits the CPU-bound move search.
- Stateless per request: the client sends the whole board each time; the
  server keeps no game state between requests.
- CORS headers are attached to every response by a middleware, including
  error responses, so the browser can read 4xx bodies.
- Validation failures (bad JSON, wrong types, unknown cell values) are
  reported as 400 rather than FastAPI's default 422.
"""

import logging
import random
from typing import Literal

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, ConfigDict, Field

from engine.constants import DEFAULT_BOARD_SIZE, MIN_BOARD_SIZE
from engine.game import play_turn, validate_board
from web.config import settings

# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------

logging.basicConfig(level=settings.log_level)
_log = logging.getLogger(__name__)

_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

# One generator per process. Seeded from the OS unless TTT_SEED is set.
_rng = random.Random(settings.seed)

app = FastAPI(title="Tic-Tac-Toe AI", version="1.0.0")


def get_rng() -> random.Random:
    """Random source handed to the engine; tests override this dependency."""
    return _rng


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------

Cell = Literal["", "X", "O"]
Winner = Literal["", "X", "O", "draw"]


class GameState(BaseModel):
    """
    Board exchanged with the client, in both directions.

    Fields:
        board:      n * n cells, row-major; each "", "X" or "O".
        board_size: Side length n, sent as "boardSize". Defaults to 3 so the
                    classic client can omit it.
        winner:     "", "X", "O" or "draw". Ignored on input; set by the
                    server on output.
    """

    model_config = ConfigDict(populate_by_name=True)

    board: list[Cell]
    board_size: int = Field(
        default=DEFAULT_BOARD_SIZE,
        alias="boardSize",
        ge=MIN_BOARD_SIZE,
        le=settings.max_board_size,
    )
    winner: Winner = ""


# ---------------------------------------------------------------------------
# Middleware and error handlers
# ---------------------------------------------------------------------------


@app.middleware("http")
async def add_cors_headers(request: Request, call_next):
    """Attach permissive CORS headers to every response."""
    response = await call_next(request)
    response.headers.update(_CORS_HEADERS)
    return response


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report unreadable or ill-typed request bodies as 400 Bad Request."""
    _log.info("Rejected request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": "Invalid request body"})


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@app.options("/play", include_in_schema=False)
def play_preflight() -> Response:
    """CORS preflight: 200 with no body."""
    return Response(status_code=200)


@app.post("/play", response_model=GameState)
def play(request: GameState, rng: random.Random = Depends(get_rng)) -> Response:
    """
    Apply the engine's reply to the human's move.

    Args:
        request: GameState with the board after the human's move.
        rng:     Random source for the N×N heuristic.

    Returns:
        GameState with the engine's move applied and the winner set.

    Raises:
        HTTPException 400: Board length does not match boardSize.
        HTTPException 500: Move computation or response encoding failed.
    """
    n = request.board_size
    board = list(request.board)

    try:
        validate_board(board, n)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    try:
        result = play_turn(board, n, rng)
    except Exception as exc:
        _log.exception("Move computation failed for n=%d board=%s", n, board)
        raise HTTPException(status_code=500, detail=f"Engine error: {exc}") from exc

    _log.info("Move=%s winner=%r size=%d", result.move, result.winner, n)

    state = GameState(board=result.board, board_size=n, winner=result.winner)
    try:
        return JSONResponse(content=state.model_dump(mode="json", by_alias=True))
    except (TypeError, ValueError) as exc:
        _log.exception("Failed to encode response")
        raise HTTPException(status_code=500, detail="Failed to encode response") from exc
