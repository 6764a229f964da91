"""Tests for logging setup."""

from loguru import logger

import settings.logging as log_settings


class TestSetupLogging:
    def test_file_sink(self, tmp_path, monkeypatch):
        monkeypatch.setattr(log_settings, "LOG_DIR", tmp_path / "logs")
        log_settings.setup_logging(level="INFO", to_file=True)
        logger.info("election created")
        logger.complete()
        logger.remove()
        assert list((tmp_path / "logs").glob("elections_*.log"))

    def test_console_only(self, tmp_path, monkeypatch):
        monkeypatch.setattr(log_settings, "LOG_DIR", tmp_path / "logs")
        log_settings.setup_logging(to_file=False)
        logger.remove()
        assert not (tmp_path / "logs").exists()
