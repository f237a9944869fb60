"""Logging configuration using loguru.

Logs are stored in the logs/ folder and kept for 1 week.
Output goes to file only by default; the CLI attaches a stderr sink on demand.
"""

import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    import loguru

# Remove default handler
logger.remove()

# Define log directory (default ~/.local/share/scopetint/logs, overridable via SCOPETINT_LOG_DIR)
_default_log_dir = Path.home() / ".local" / "share" / "scopetint" / "logs"
LOG_DIR = Path(os.environ.get("SCOPETINT_LOG_DIR", str(_default_log_dir))).expanduser().resolve()

STDERR_FORMAT = "<level>{level: <8}</level> | <cyan>{extra[name]}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


class _LoggingState:
    """Internal state tracker for logging configuration."""

    def __init__(self) -> None:
        """Initialize logging state without any console handler."""
        self.file_handler_id: int | None = None
        self.stderr_handler_id: int | None = None


_state = _LoggingState()

try:
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    _state.file_handler_id = logger.add(
        LOG_DIR / "scopetint_{time:YYYY-MM-DD}.log",
        level="DEBUG",
        format=FILE_FORMAT,
        rotation="00:00",  # New file at midnight
        retention="1 week",  # Keep logs for 1 week
        compression="gz",  # Compress old logs
        backtrace=True,
        diagnose=False,
    )
except OSError:
    # Read-only home directories still get console logging through the CLI
    _state.file_handler_id = None


def get_logger(name: str) -> "loguru.Logger":
    """Get a logger instance with the given name.

    Args:
        name: The name for the logger (typically __name__).

    Returns:
        A configured logger instance.
    """
    return logger.bind(name=name)


def add_stderr_sink(level: str = "WARNING") -> int:
    """Attach a colorized stderr sink, replacing any previous one.

    Args:
        level: Minimum log level for the sink.

    Returns:
        The sink ID that can be used to remove the sink later.
    """
    if _state.stderr_handler_id is not None:
        logger.remove(_state.stderr_handler_id)
    _state.stderr_handler_id = logger.add(
        sys.stderr,
        level=level,
        format=STDERR_FORMAT,
        colorize=True,
        filter=lambda record: "name" in record["extra"],
    )
    return _state.stderr_handler_id


def remove_sink(sink_id: int) -> None:
    """Remove a sink previously added by this module.

    Args:
        sink_id: The sink ID returned by add_stderr_sink.
    """
    logger.remove(sink_id)
    if _state.stderr_handler_id == sink_id:
        _state.stderr_handler_id = None
