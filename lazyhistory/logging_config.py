"""Centralized logging setup.

The ``lazyhistory`` logger writes to a rotating file under the platform log
directory and echoes to stderr in debug mode. Command handlers report failures
through ``log_error`` with their component tag.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "lazyhistory"
DEBUG_ENV_VAR = "LAZYHISTORY_DEBUG"
LOG_DIR = Path(user_log_dir(APP_NAME, appauthor=False))
LOG_FILENAME = "lazyhistory.log"

MAX_LOG_SIZE = 2 * 1024 * 1024
MAX_LOG_FILES = 5
BUFFER_CAPACITY = 100

DEBUG_MODE = os.environ.get(DEBUG_ENV_VAR, "").strip() not in {"", "0", "false"}

_logger: logging.Logger | None = None


def log_file_path() -> Path:
    return LOG_DIR / LOG_FILENAME


def get_logger() -> logging.Logger:
    """Return the application logger, configuring handlers on first use."""
    global _logger

    if _logger is not None:
        return _logger

    _logger = logging.getLogger(APP_NAME)
    _logger.setLevel(logging.DEBUG if DEBUG_MODE else logging.INFO)
    _logger.propagate = False

    if _logger.handlers:
        return _logger

    console_handler = logging.StreamHandler(sys.stderr)
    # User-facing errors go through the notifier; the console only echoes in debug mode.
    console_handler.setLevel(logging.DEBUG if DEBUG_MODE else logging.CRITICAL)
    console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    _logger.addHandler(console_handler)

    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file_path(),
            maxBytes=MAX_LOG_SIZE,
            backupCount=MAX_LOG_FILES,
            encoding="utf-8",
        )
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        # Buffered so git-heavy sessions do not hit the disk per record.
        memory_handler = logging.handlers.MemoryHandler(
            capacity=BUFFER_CAPACITY,
            flushLevel=logging.ERROR,
            target=file_handler,
        )
        memory_handler.setLevel(logging.DEBUG if DEBUG_MODE else logging.INFO)
        _logger.addHandler(memory_handler)
    except OSError as exc:
        _logger.warning(f"Could not create log file: {exc}")

    return _logger


def set_debug_mode(enabled: bool) -> None:
    """Switch the logger and its handlers between DEBUG and default levels."""
    global DEBUG_MODE
    DEBUG_MODE = enabled

    logger = get_logger()
    logger.setLevel(logging.DEBUG if enabled else logging.INFO)
    for handler in logger.handlers:
        if isinstance(handler, logging.handlers.MemoryHandler):
            handler.setLevel(logging.DEBUG if enabled else logging.INFO)
        else:
            handler.setLevel(logging.DEBUG if enabled else logging.CRITICAL)


def flush_logs() -> None:
    """Flush buffered records; called before the CLI exits."""
    if _logger is None:
        return
    for handler in _logger.handlers:
        handler.flush()


def log_error(exc: BaseException, component: str) -> None:
    """Record a failure raised inside ``component``."""
    get_logger().error(f"[{component}] {exc}", exc_info=(type(exc), exc, exc.__traceback__))


def log_warning(message: str) -> None:
    get_logger().warning(message)


def log_info(message: str) -> None:
    get_logger().info(message)


def log_debug(message: str) -> None:
    if DEBUG_MODE:
        get_logger().debug(message)


__all__ = [
    "get_logger",
    "set_debug_mode",
    "flush_logs",
    "log_error",
    "log_warning",
    "log_info",
    "log_debug",
    "log_file_path",
]
