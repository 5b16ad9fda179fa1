"""
Logging Configuration for the Hoops Career simulation

This module provides logging configuration with:
- Rotating file handlers (prevents unbounded log growth)
- Colored console output
- A module-specific preset for the persistence layer

Usage Example:
    from hoops_career.logging_config import setup_logging, get_logger

    setup_logging(level="INFO", log_dir="logs", enable_console=True, enable_file=True)

    logger = get_logger(__name__)
    logger.info("Career started")

Log Files Created:
- logs/hoops_career.log: Main application log (INFO+)
- logs/hoops_career_debug.log: Debug log (DEBUG+)
- logs/hoops_career_error.log: Error log (ERROR+)

Each file rotates at 10MB with 5 backup files.
"""

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional


DETAILED_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"
)

SIMPLE_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

CONSOLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_PREFIX = "hoops_career"


class ColoredFormatter(logging.Formatter):
    """
    Colored formatter for console output.

    Adds ANSI color codes to log levels. The record is copied first so
    file handlers sharing the record never see the escape codes.
    """

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'
    }

    def format(self, record):
        levelname = record.levelname
        if levelname in self.COLORS:
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = (
                f"{self.COLORS[levelname]}{levelname}{self.COLORS['RESET']}"
            )
        return super().format(record)


def setup_logging(
    level: str = "INFO",
    log_dir: str = "logs",
    enable_console: bool = True,
    enable_file: bool = True,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    format_style: str = "detailed"
) -> None:
    """
    Setup application-wide logging configuration.

    Call once at application startup.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files
        enable_console: Whether to log to console
        enable_file: Whether to log to file
        max_bytes: Maximum size per log file before rotation
        backup_count: Number of backup files to keep
        format_style: "detailed" or "simple" format
    """
    if enable_file:
        Path(log_dir).mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    log_format = DETAILED_FORMAT if format_style == "detailed" else SIMPLE_FORMAT

    if enable_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, level.upper()))
        console_handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(console_handler)

    if enable_file:
        # (suffix, level, format)
        file_specs = [
            ("", logging.INFO, log_format),
            ("_debug", logging.DEBUG, DETAILED_FORMAT),
            ("_error", logging.ERROR, DETAILED_FORMAT),
        ]
        for suffix, handler_level, handler_format in file_specs:
            handler = logging.handlers.RotatingFileHandler(
                filename=os.path.join(log_dir, f"{LOG_FILE_PREFIX}{suffix}.log"),
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8'
            )
            handler.setLevel(handler_level)
            handler.setFormatter(logging.Formatter(handler_format, datefmt=DATE_FORMAT))
            root_logger.addHandler(handler)

    root_logger.info(
        f"Logging initialized - Level: {level}, "
        f"Console: {enable_console}, File: {enable_file}"
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module (typically ``__name__``)."""
    return logging.getLogger(name)


def log_exception(
    logger: logging.Logger,
    exception: Exception,
    context: Optional[dict] = None,
    level: str = "ERROR"
) -> None:
    """
    Log an exception with full traceback and context.

    Args:
        logger: Logger instance
        exception: Exception to log
        context: Additional context dict (player, season, operation, ...)
        level: Log level (default: ERROR)

    Example:
        >>> try:
        ...     engine.process_choice(player, event, "play_game")
        ... except TurnExecutionException as e:
        ...     log_exception(logger, e, context={"player": player.name, "operation": "handle_choice"})
    """
    log_level = getattr(logging, level.upper())

    context_str = ""
    if context:
        context_items = [f"{k}={v}" for k, v in context.items()]
        context_str = f" [{', '.join(context_items)}]"

    logger.log(
        log_level,
        f"Exception occurred{context_str}: {type(exception).__name__}: {str(exception)}",
        exc_info=exception
    )


def configure_module_logger(
    module_name: str,
    level: Optional[str] = None,
    propagate: bool = True
) -> logging.Logger:
    """
    Configure logging for a specific module.

    Args:
        module_name: Module name (e.g., "hoops_career.simulation.turn_engine")
        level: Log level for this module (None = inherit from root)
        propagate: Whether to propagate to parent loggers

    Returns:
        Configured logger
    """
    logger = logging.getLogger(module_name)

    if level:
        logger.setLevel(getattr(logging, level.upper()))

    logger.propagate = propagate

    return logger


class LogContext:
    """
    Context manager for temporary log level changes.

    Example:
        >>> logger = get_logger(__name__)
        >>> with LogContext(logger, "DEBUG"):
        ...     engine.advance_day(player)
    """

    def __init__(self, logger: logging.Logger, level: str):
        self.logger = logger
        self.new_level = getattr(logging, level.upper())
        self.original_level = logger.level

    def __enter__(self):
        self.logger.setLevel(self.new_level)
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.logger.setLevel(self.original_level)


# Module-specific logger configurations

def setup_persistence_logging(level: str = "WARNING") -> None:
    """
    Configure logging for database and save-state operations.

    Database operations are verbose, so default to WARNING.
    """
    configure_module_logger("hoops_career.database", level=level)
    configure_module_logger("hoops_career.persistence", level=level)
    configure_module_logger("GameStateStore", level=level)


# Quick setup presets

def setup_production_logging(log_dir: str = "logs") -> None:
    """INFO to rotating files only, simple format."""
    setup_logging(
        level="INFO",
        log_dir=log_dir,
        enable_console=False,
        enable_file=True,
        format_style="simple"
    )


def setup_development_logging(log_dir: str = "logs") -> None:
    """DEBUG to colored console and files, detailed format."""
    setup_logging(
        level="DEBUG",
        log_dir=log_dir,
        enable_console=True,
        enable_file=True,
        format_style="detailed"
    )
