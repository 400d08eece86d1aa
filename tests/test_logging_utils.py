"""Tests for logging setup."""

import logging

import pytest

from qdedupe.utils.logging_utils import setup_logging


class TestSetupLogging:
    def test_sets_level(self):
        setup_logging("warning")
        assert logging.getLogger().level == logging.WARNING
        setup_logging("INFO")

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError, match="Logging level must be one of"):
            setup_logging("verbose")

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "run.log"
        setup_logging("INFO", str(log_file))
        logging.getLogger("qdedupe.test").info("hello")

        assert "hello" in log_file.read_text()
        setup_logging("INFO")
