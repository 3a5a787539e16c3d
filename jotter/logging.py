# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""
Logging infrastructure for jotter.

Daily log files with automatic cleanup.
Enable via ~/.jotter/config.json: {"logging": {"debug": true}}

Log files are created at ~/.jotter/logs/jotter_<date>.log
Every invocation appends to the same daily file.
"""

import sys
import uuid
from datetime import datetime
from pathlib import Path
from typing import Optional

from loguru import logger

from jotter.core.config import get_config

# Session ID - generated once per process (for correlating log entries)
_session_id: Optional[str] = None
_configured: bool = False


def get_session_id() -> str:
    """Get or generate the current session ID."""
    global _session_id
    if _session_id is None:
        _session_id = uuid.uuid4().hex[:8]
    return _session_id


def get_log_dir() -> Path:
    """Get the log directory path."""
    return Path.home() / ".jotter" / "logs"


def get_daily_log_path() -> Path:
    """Get the log file path for today."""
    today = datetime.now().strftime("%Y-%m-%d")
    return get_log_dir() / f"jotter_{today}.log"


def cleanup_old_logs(retention_count: int) -> int:
    """
    Remove old log files, keeping only the most recent N days.

    Args:
        retention_count: Number of daily log files to keep

    Returns:
        Number of files deleted
    """
    log_dir = get_log_dir()
    if not log_dir.exists():
        return 0

    # Newest first
    log_files = sorted(
        log_dir.glob("jotter_*.log"),
        key=lambda p: p.stat().st_mtime,
        reverse=True,
    )

    deleted = 0
    for old_file in log_files[retention_count:]:
        try:
            old_file.unlink()
            deleted += 1
        except OSError:
            pass  # Another process may have removed it already

    return deleted


def configure_logging() -> None:
    """
    Configure loguru based on config settings.

    If debug is disabled, logging goes nowhere (no sinks).
    If debug is enabled, logs append to the daily file.
    """
    global _configured
    if _configured:
        return

    config = get_config()

    # Remove default stderr handler
    logger.remove()

    if config.logging.debug:
        log_dir = get_log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)

        cleanup_old_logs(config.logging.log_retention_count)

        session_id = get_session_id()

        log_path = get_daily_log_path()
        logger.add(
            log_path,
            format="{time:HH:mm:ss} | {level: <7} | [" + session_id + "] {message}",
            level="DEBUG",
            rotation=None,  # One file per day
            retention=None,  # We handle retention manually
        )

        # Also add stderr for immediate feedback (INFO level only)
        logger.add(
            sys.stderr,
            format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <7}</level> | {message}",
            level="INFO",
            colorize=True,
        )

        logger.bind(name="jotter").debug(f"Log file: {log_path}")

    _configured = True


def reset_logging() -> None:
    """
    Forget the current configuration so the next get_logger() re-reads it.

    Only the test suite calls this, to isolate config changes between tests.
    """
    global _configured
    logger.remove()
    _configured = False


def get_logger(name: str = "jotter"):
    """
    Get a configured logger instance.

    Automatically configures logging on first call.

    Args:
        name: Logger name (for filtering)

    Returns:
        Configured loguru logger
    """
    configure_logging()
    return logger.bind(name=name)


def log_command_start(command: str, **context) -> None:
    """Log that a command has started."""
    log = get_logger("commands")
    log.debug(f"{command} started")
    if context:
        log.debug(f"  → {context}")


def log_command_end(command: str, **results) -> None:
    """Log that a command has completed."""
    log = get_logger("commands")
    log.info(f"{command} completed")
    if results:
        log.debug(f"  → {results}")


def log_error(context: str, error: Exception) -> None:
    """Log an error with context."""
    log = get_logger("errors")
    log.error(f"{context}: {type(error).__name__}: {error}")
