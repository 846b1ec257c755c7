"""Tests for settings, logging setup and background tasks."""

import sys
import threading

import pytest
from loguru import logger

from kasir.config import Settings, get_settings
from kasir.logging import setup_logging
from kasir.tasks import spawn


class TestSettings:
    """Settings defaults and environment overrides."""

    def test_defaults_need_no_configuration(self, monkeypatch):
        """Every field should have a usable default."""
        for name in ("KASIR_SENTINEL", "KASIR_MENU_JSON_PATH", "KASIR_CURRENCY_PREFIX", "KASIR_LOG_DIR"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.sentinel == "selesai"
        assert settings.currency_prefix == "Rp"
        assert settings.menu_json_path is None
        assert settings.log_dir == "logs"

    def test_environment_override(self, monkeypatch):
        """KASIR_* variables should override defaults."""
        monkeypatch.setenv("KASIR_SENTINEL", "done")
        monkeypatch.setenv("KASIR_PROCESSING_DELAY_SECONDS", "0.5")
        settings = Settings(_env_file=None)
        assert settings.sentinel == "done"
        assert settings.processing_delay_seconds == 0.5

    def test_get_settings_is_cached(self):
        """get_settings() should return the same instance every time."""
        assert get_settings() is get_settings()


class TestSetupLogging:
    """Loguru sink configuration."""

    def test_setup_without_file_sink(self, capsys):
        """Messages at or above the level should reach stderr."""
        setup_logging(level="INFO", log_to_file=False)
        try:
            logger.info("kasir logging ready")
            logger.debug("hidden detail")
            err = capsys.readouterr().err
        finally:
            logger.remove()
            logger.add(sys.__stderr__)
        assert "kasir logging ready" in err
        assert "hidden detail" not in err

    def test_file_sink_writes_to_configured_dir(self, tmp_path):
        """The log file should land in the configured directory."""
        log_dir = tmp_path / "kasir-logs"
        setup_logging(level="ERROR", log_to_file=True, log_dir=log_dir)
        try:
            logger.debug("file only detail")
        finally:
            logger.remove()
            logger.add(sys.__stderr__)
        assert "file only detail" in (log_dir / "kasir.log").read_text(encoding="utf-8")


class TestSpawn:
    """Background tasks return explicit join handles."""

    def test_result_is_returned(self):
        """The handle should yield the task's return value."""
        assert spawn(lambda a, b: a + b, 2, 3, name="adder").result(timeout=5) == 5

    def test_exception_is_propagated(self):
        """Errors raised by the task should surface on join."""

        def boom():
            raise KeyError("missing")

        with pytest.raises(KeyError):
            spawn(boom, name="boom").result(timeout=5)

    def test_runs_on_named_daemon_thread(self):
        """Tasks should run off the calling thread."""
        handle = spawn(threading.current_thread, name="order-processing")
        thread = handle.result(timeout=5)
        assert thread is not threading.current_thread()
        assert thread.name == "order-processing"
        assert thread.daemon
