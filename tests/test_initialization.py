"""Tests for settings and logging setup."""

import pytest
import structlog

from acmg_scorer.core.config import Settings
from acmg_scorer.core.initialization import configure_logging


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ACMG_LOG_LEVEL", raising=False)
        monkeypatch.delenv("ACMG_LOG_JSON", raising=False)
        settings = Settings(_env_file=None)
        assert settings.log_level == "WARNING"
        assert settings.log_json is False

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("ACMG_LOG_LEVEL", "debug")
        monkeypatch.setenv("ACMG_LOG_JSON", "true")
        settings = Settings(_env_file=None)
        assert settings.log_level == "debug"
        assert settings.log_json is True


class TestConfigureLogging:
    """Tests for structlog configuration."""

    def teardown_method(self):
        configure_logging(level="WARNING", json_logs=False, force=True)

    def test_invalid_level(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            configure_logging(level="LOUD", force=True)

    def test_json_logs_go_to_stderr(self, capsys):
        configure_logging(level="INFO", json_logs=True, force=True)
        structlog.get_logger("test").info("hello", code="PVS1")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert '"event": "hello"' in captured.err
        assert '"code": "PVS1"' in captured.err

    def test_level_filtering(self, capsys):
        configure_logging(level="ERROR", force=True)
        structlog.get_logger("test").warning("quiet")
        assert capsys.readouterr().err == ""
