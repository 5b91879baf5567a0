# Area: Shared
"""
reveal_referee._shared.logging_config — Structured logging setup
================================================================

Configures dual logging: terminal (colored) + file (JSON).
Provides the logging hook used at request boundaries for unexpected
failures.

Submitted values never reach these handlers: the match core only logs
participant ids, slot positions and value lengths.
"""

from __future__ import annotations
import logging
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from .error_formatter import format_error_block

# Package logger
logger = logging.getLogger("reveal_referee")


class TerminalFormatter(logging.Formatter):
    """Colored formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        original = record.levelname
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


class JSONFormatter(logging.Formatter):
    """JSON formatter for file output."""

    EXTRA_FIELDS = ("channel_key", "operation", "error_type")

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in self.EXTRA_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(
    log_file_path: Optional[str] = "reveal_referee.log",
    level: int = logging.INFO,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str or None
        Path to the JSON log file. None disables file logging.
    level : int
        Logging level. Defaults to INFO.
    """
    pkg_logger = logging.getLogger("reveal_referee")
    pkg_logger.setLevel(level)
    pkg_logger.handlers.clear()

    terminal_handler = logging.StreamHandler(sys.stdout)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    pkg_logger.addHandler(terminal_handler)

    if log_file_path:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)
        except OSError as e:
            pkg_logger.warning(f"Could not create log file: {e}")

    # discord.py logs under its own root; route it through the same handlers
    discord_logger = logging.getLogger("discord")
    discord_logger.setLevel(max(level, logging.INFO))
    discord_logger.handlers = list(pkg_logger.handlers)
    discord_logger.propagate = False

    pkg_logger.propagate = False


def log_unexpected_error(
    error: BaseException,
    operation: str,
    context: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Log a failure that escaped a request handler.

    Prints the structured block to stderr and records a one-line entry
    in the package log.
    """
    print(format_error_block(error, operation, context), file=sys.stderr)
    logger.error(
        f"Unexpected error in {operation}: {error.__class__.__name__}: {error}",
        extra={
            "operation": operation,
            "error_type": error.__class__.__name__,
        },
    )
