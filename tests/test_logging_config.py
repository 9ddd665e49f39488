# -*- coding: utf-8 -*-
"""
tests/test_logging_config.py
============================
Tests for LoggingConfig and ColoredFormatter.
"""
import logging
import os
import time

import pytest

from typescale.core.logging_config import ColoredFormatter, LoggingConfig


@pytest.fixture
def library_logger():
    logger = logging.getLogger(LoggingConfig.LOGGER_NAME)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


class TestSetupLogging:

    def test_file_handler(self, tmp_path, library_logger):
        logger = LoggingConfig.setup_logging(log_level="DEBUG", log_dir=str(tmp_path / "logs"), enable_console=False)
        assert logger is library_logger
        assert logger.level == logging.DEBUG

        logging.getLogger("typescale.font").info("resolved")
        for handler in logger.handlers:
            handler.flush()

        files = list((tmp_path / "logs").glob("typescale_*.log"))
        assert len(files) == 1
        assert "resolved" in files[0].read_text(encoding="utf-8")

    def test_level_from_config(self, monkeypatch, library_logger):
        monkeypatch.setenv("TYPESCALE_LOG_LEVEL", "warning")
        logger = LoggingConfig.setup_logging(enable_console=False)
        assert logger.level == logging.WARNING
        assert logger.handlers == []

    def test_repeated_setup_replaces_handlers(self, library_logger):
        LoggingConfig.setup_logging(log_level="INFO")
        LoggingConfig.setup_logging(log_level="INFO")
        assert len(library_logger.handlers) == 1


class TestColoredFormatter:

    def test_levelname_restored(self):
        record = logging.LogRecord("typescale", logging.ERROR, __file__, 1, "boom", None, None)
        output = ColoredFormatter("%(levelname)s %(message)s").format(record)
        assert "\033[31m" in output
        assert record.levelname == "ERROR"


class TestCleanup:

    def test_removes_old_files_only(self, tmp_path):
        old = tmp_path / "typescale_20200101.log"
        new = tmp_path / "typescale_20990101.log"
        other = tmp_path / "unrelated.log"
        for path in (old, new, other):
            path.write_text("x", encoding="utf-8")
        long_ago = time.time() - 90 * 24 * 3600
        os.utime(old, (long_ago, long_ago))
        os.utime(other, (long_ago, long_ago))

        assert LoggingConfig.cleanup_old_logs(str(tmp_path), days_to_keep=30) == 1
        assert not old.exists()
        assert new.exists()
        assert other.exists()

    def test_missing_dir(self, tmp_path):
        assert LoggingConfig.cleanup_old_logs(str(tmp_path / "nope")) == 0
