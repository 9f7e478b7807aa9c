"""Tests for settings and logging configuration."""

from structlog.testing import capture_logs

from fieldtypes.config import Settings, get_settings
from fieldtypes.logging_config import configure_logging
from fieldtypes.services.event_logger import EventLogger
from fieldtypes.validators.html import strip_html
from fieldtypes.validators.text import short_text_validator


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.DEBUG is False
        assert settings.LOG_LEVEL == "info"
        assert settings.ALLOW_BASIC_HTML is False

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("FIELDTYPES_LOG_LEVEL", "debug")
        monkeypatch.setenv("FIELDTYPES_DEBUG", "1")
        settings = get_settings()
        assert settings.LOG_LEVEL == "debug"
        assert settings.DEBUG is True

    def test_cached(self):
        assert get_settings() is get_settings()


class TestConfigureLogging:
    def test_debug_events_visible_at_debug_level(self):
        configure_logging(Settings(LOG_LEVEL="debug", DEBUG=True))
        with capture_logs() as logs:
            short_text_validator.test("hello")
        assert logs[0]["event"] == "field_validated"
        assert logs[0]["data_type"] == "ShortText"
        assert logs[0]["valid"] is True

    def test_level_filters_debug_events(self):
        configure_logging(Settings(LOG_LEVEL="warning"))
        with capture_logs() as logs:
            short_text_validator.test("hello")
            strip_html("<b>x</b>", allow_basic_html=True)
        assert [log["event"] for log in logs] == ["basic_html_allowlist_unavailable"]

    def test_unknown_level_falls_back_to_info(self):
        configure_logging(Settings(LOG_LEVEL="chatty"))
        with capture_logs() as logs:
            short_text_validator.test("hello")
        assert logs == []


class TestUnconfiguredLogging:
    def test_validation_silent_before_configuration(self, capsys):
        short_text_validator.test("hello")
        EventLogger().new("build")
        assert capsys.readouterr().out == ""

    def test_validation_logs_after_configuration(self, capsys):
        configure_logging(Settings(LOG_LEVEL="debug"))
        short_text_validator.test("hello")
        assert "field_validated" in capsys.readouterr().out
