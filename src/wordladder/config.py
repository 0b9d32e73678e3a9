from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    # Search used when the player leaves the method prompt empty.
    search_method: str = os.getenv("WORDLADDER_SEARCH_METHOD", "BFS")

    # Typing this at the continue prompt ends the game.
    end_token: str = os.getenv("WORDLADDER_END_TOKEN", "END")

    # Logging
    verbose: bool = _env_flag("WORDLADDER_VERBOSE")
    log_json: bool = _env_flag("WORDLADDER_LOG_JSON")
