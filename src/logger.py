"""
Logging for the game counter.

The Streamlit app configures the root logger once per process through
setup_logger(); modules take a named logger with get_logger(__name__).
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def detach_handlers(logger: logging.Logger) -> int:
    """
    Remove and close every handler on `logger`. Returns how many were dropped.
    """
    dropped = 0
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
        dropped += 1
    return dropped


def build_handlers(log_file: Optional[str], show_console: bool) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []
    if show_console:
        handlers.append(logging.StreamHandler(sys.stdout))
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    return handlers


def setup_logger(
    log_level=logging.INFO,
    log_file: Optional[str] = None,
    log_format: str = LOG_FORMAT,
    date_format: str = DATE_FORMAT,
    show_console: bool = True,
) -> logging.Logger:
    """
    (Re)configure the root logger: stdout and/or a UTF-8 log file.
    Handlers from an earlier call are closed first, so calling this again
    never leaves a file stream open behind it.
    """
    root = logging.getLogger()
    detach_handlers(root)
    root.setLevel(log_level)

    formatter = logging.Formatter(log_format, datefmt=date_format)
    for handler in build_handlers(log_file, show_console):
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
