"""Logging setup for applications embedding nestor.

The package disables its own loguru records on import, so a bot that
never calls setup_logging() sees no delivery chatter. setup_logging()
turns them back on and installs:
- a console sink on stderr with configurable verbosity
- a rotating file sink at ~/.nestor/logs/nestor.log
"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

_CONSOLE_FORMAT = "<level>{level:<8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - {message}"
_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} - {message}"


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_dir: Path | None = None,
) -> Path:
    """Enable nestor's records and route them to the console and a log file.

    Args:
        verbose: Show DEBUG-level messages (buffered and posted payloads) on console.
        quiet: Suppress console output below WARNING.
        log_dir: Directory for the log file. Defaults to ~/.nestor/logs.

    Returns the path of the log file.
    """
    logger.enable("nestor")
    logger.remove()

    console_level = "WARNING" if quiet else "DEBUG" if verbose else "INFO"
    logger.add(sys.stderr, level=console_level, format=_CONSOLE_FORMAT, colorize=True)

    log_path = log_dir or (Path.home() / ".nestor" / "logs")
    log_path.mkdir(parents=True, exist_ok=True)
    log_file = log_path / "nestor.log"

    # Only nestor's own records go to its file; the host app keeps its own.
    logger.add(
        log_file,
        level="DEBUG",
        format=_FILE_FORMAT,
        filter="nestor",
        rotation="10 MB",
        retention=5,
        encoding="utf-8",
        enqueue=True,
    )
    return log_file
