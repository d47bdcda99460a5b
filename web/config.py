"""
Server settings read from the environment.

Values are read once, when the module is first imported. Empty variables are
treated as unset.

    TTT_HOST            Interface to bind (default 0.0.0.0)
    TTT_PORT            Port to listen on (default 8080)
    TTT_LOG_LEVEL       Root logging level (default INFO)
    TTT_MAX_BOARD_SIZE  Largest accepted boardSize (default 10)
    TTT_SEED            Integer seed for the move randomizer; unset = OS entropy
"""

import os
from dataclasses import dataclass


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    if v is not None and v.strip() != "":
        return v.strip()
    return default


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    max_board_size: int = 10
    seed: int | None = None


def load_settings() -> Settings:
    """Build a Settings instance from TTT_* environment variables."""
    seed = _env("TTT_SEED")
    return Settings(
        host=_env("TTT_HOST", "0.0.0.0"),
        port=int(_env("TTT_PORT", "8080")),
        log_level=_env("TTT_LOG_LEVEL", "INFO").upper(),
        max_board_size=int(_env("TTT_MAX_BOARD_SIZE", "10")),
        seed=int(seed) if seed else None,
    )


settings = load_settings()
