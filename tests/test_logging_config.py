"""
Tests for the logging configuration helpers.
"""

import logging
import logging.handlers

import pytest

from hoops_career.logging_config import (
    LOG_FILE_PREFIX, ColoredFormatter, LogContext, configure_module_logger, get_logger,
    log_exception, setup_logging, setup_persistence_logging, setup_production_logging
)
from hoops_career.simulation import TurnExecutionException


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    def test_creates_rotating_log_files(self, tmp_path, restore_root_logger):
        log_dir = tmp_path / "logs"

        setup_logging(level="DEBUG", log_dir=str(log_dir), enable_console=False)
        logging.getLogger("hoops_career.test").error("something broke")
        for handler in restore_root_logger.handlers:
            handler.flush()

        for suffix in ("", "_debug", "_error"):
            assert (log_dir / f"{LOG_FILE_PREFIX}{suffix}.log").exists()
        assert "something broke" in (log_dir / f"{LOG_FILE_PREFIX}_error.log").read_text()

    def test_console_only(self, tmp_path, restore_root_logger):
        log_dir = tmp_path / "unused"

        setup_logging(level="WARNING", log_dir=str(log_dir), enable_console=True, enable_file=False)

        assert not log_dir.exists()
        assert restore_root_logger.level == logging.WARNING
        assert len(restore_root_logger.handlers) == 1


class TestHelpers:
    def test_log_exception_includes_context(self, caplog):
        logger = logging.getLogger("hoops_career.test.exceptions")
        error = TurnExecutionException("Turn failed", stage="advance_day")

        with caplog.at_level(logging.ERROR, logger="hoops_career.test.exceptions"):
            log_exception(logger, error, context={"player": "Test Player"})

        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert "player=Test Player" in record.getMessage()
        assert "TurnExecutionException" in record.getMessage()
        assert record.exc_info is not None

    def test_log_context_restores_level(self):
        logger = logging.getLogger("hoops_career.test.context")
        logger.setLevel(logging.WARNING)

        with LogContext(logger, "DEBUG"):
            assert logger.level == logging.DEBUG
        assert logger.level == logging.WARNING

    def test_configure_module_logger(self):
        logger = configure_module_logger("hoops_career.test.module", level="ERROR", propagate=False)
        assert logger.level == logging.ERROR
        assert logger.propagate is False

    def test_colored_formatter_leaves_record_untouched(self):
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "hello", None, None)
        formatted = ColoredFormatter("%(levelname)s %(message)s").format(record)

        assert "\033[32m" in formatted
        assert record.levelname == "INFO"


class TestPresets:
    def test_production_logs_to_files_only(self, tmp_path, restore_root_logger):
        setup_production_logging(str(tmp_path))

        assert restore_root_logger.level == logging.INFO
        assert all(
            isinstance(handler, logging.handlers.RotatingFileHandler)
            for handler in restore_root_logger.handlers
        )

    def test_persistence_preset_quiets_the_store(self):
        setup_persistence_logging("ERROR")

        assert get_logger("GameStateStore").level == logging.ERROR
        assert get_logger("hoops_career.database").level == logging.ERROR

        for name in ("GameStateStore", "hoops_career.database", "hoops_career.persistence"):
            get_logger(name).setLevel(logging.NOTSET)
