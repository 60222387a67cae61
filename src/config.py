"""
Settings for the game counter.

Values are read once at import; environment variables override the defaults.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

_TRUTHY = {"1", "true", "yes", "on"}


def env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUTHY


def env_positive_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name}={raw!r} is not an integer")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def env_log_level(name: str, default: int = logging.INFO) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"{name}={raw!r} is not a logging level")
    return level


# ===== parser =====
@dataclass
class ParserConfig:
    VERBOSE: bool = field(default_factory=lambda: env_flag("GAME_COUNTER_VERBOSE"))


# ===== Streamlit app =====
@dataclass
class AppConfig:
    PAGE_TITLE: str = "Game Counter"
    PLACEHOLDER_TEXT: str = (
        "1. Alice Bob 21-15 Carol Dave\n"
        "2. Alice Carol 21-19 Bob Dave"
    )
    TEXT_AREA_HEIGHT: int = 300
    PARSE_CACHE_ENTRIES: int = 32
    CHART_MAX_PLAYERS: int = field(
        default_factory=lambda: env_positive_int("GAME_COUNTER_CHART_MAX_PLAYERS", 30)
    )


# ===== logging =====
@dataclass
class LogConfig:
    LEVEL: int = field(default_factory=lambda: env_log_level("GAME_COUNTER_LOG_LEVEL"))
    FILE: Optional[str] = field(default_factory=lambda: os.environ.get("GAME_COUNTER_LOG_FILE") or None)


parser_config = ParserConfig()
app_config = AppConfig()
log_config = LogConfig()
