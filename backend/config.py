"""
Runtime settings, read from the environment (and a local .env file).
"""

import os
import logging
from typing import List

from dotenv import load_dotenv

from domain.constants import DEFAULT_BOARD_SIZE

load_dotenv()

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


def get_board_size() -> int:
    """Board edge length from SNAKE_BOARD_SIZE, falling back to the default."""
    raw = os.getenv("SNAKE_BOARD_SIZE")
    if not raw:
        return DEFAULT_BOARD_SIZE
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"SNAKE_BOARD_SIZE must be an integer, got {raw!r}")


def get_log_level() -> int:
    name = os.getenv("SNAKE_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown SNAKE_LOG_LEVEL {name!r}")
    return level


def get_cors_origins() -> List[str]:
    # Comma-separated list, e.g. "https://a.example,https://b.example"
    allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
    if allowed_origins_env:
        return [o.strip() for o in allowed_origins_env.split(",") if o.strip()]
    return list(DEFAULT_CORS_ORIGINS)


def configure_logging() -> None:
    logging.basicConfig(level=get_log_level(), format=LOG_FORMAT)
