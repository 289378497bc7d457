"""
Single place to:
- Read settings from env (and a local .env if present)
- Validate them before the game starts

The rules themselves (4 symbols, 8 colours, 12 turns) are fixed and live in
engine.py / store.py; only how the program behaves around them is configurable.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .types import RandomSource

RANDOM_SOURCES = ("local", "random.org")
TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    random_source: RandomSource = "local"
    random_timeout: float = 3.0
    show_code: bool = False


def load_settings() -> Settings:
    # 1) Load env vars from .env if present; real env vars win
    load_dotenv()

    # 2) Log level must be a name the logging module knows
    log_level = os.getenv("MASTERMIND_LOG_LEVEL", "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise RuntimeError(
            f"MASTERMIND_LOG_LEVEL={log_level!r} is not a logging level (try DEBUG, INFO, WARNING)."
        )

    # 3) Where the secret comes from
    random_source = os.getenv("MASTERMIND_RANDOM_SOURCE", "local").strip().lower()
    if random_source not in RANDOM_SOURCES:
        raise RuntimeError(
            f"MASTERMIND_RANDOM_SOURCE must be one of {', '.join(RANDOM_SOURCES)}, got {random_source!r}."
        )

    # 4) Keep the network quick; past this we fall back to local randomness
    raw_timeout = os.getenv("MASTERMIND_RANDOM_TIMEOUT", "3.0")
    try:
        random_timeout = float(raw_timeout)
    except ValueError:
        raise RuntimeError(f"MASTERMIND_RANDOM_TIMEOUT must be a number, got {raw_timeout!r}.") from None
    if random_timeout <= 0:
        raise RuntimeError("MASTERMIND_RANDOM_TIMEOUT must be positive.")

    # 5) Debug aid: print the secret when the game starts
    show_code = os.getenv("MASTERMIND_SHOW_CODE", "").strip().lower() in TRUTHY

    return Settings(
        log_level=log_level,
        random_source=random_source,
        random_timeout=random_timeout,
        show_code=show_code,
    )
