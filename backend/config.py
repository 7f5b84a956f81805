"""
Runtime configuration for the snake server.

Values come from the environment (a local .env file is loaded first).
Strategy weights are not configured here; they live in domain/constants.py.
"""

import os

from dotenv import load_dotenv

load_dotenv()


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


# Appearance returned by the identify endpoint
SNAKE_AUTHOR = os.getenv("SNAKE_AUTHOR", "")
SNAKE_COLOR = os.getenv("SNAKE_COLOR", "#2E8B57")
SNAKE_HEAD = os.getenv("SNAKE_HEAD", "default")
SNAKE_TAIL = os.getenv("SNAKE_TAIL", "default")
SNAKE_VERSION = os.getenv("SNAKE_VERSION", "0.1.0")

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = _int_env("PORT", 8000)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Milliseconds kept back from the host's timeout for network latency
LATENCY_MARGIN_MS = _int_env("LATENCY_MARGIN_MS", 150)
