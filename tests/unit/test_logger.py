"""Tests for logging utilities."""

import importlib
import logging
import sys
from types import SimpleNamespace

import pytest
from structlog.testing import capture_logs

from gostub import logger as logger_module
from gostub.logger import get_logger, setup_file_logging, setup_logging


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    setup_logging(force=True)


class TestSetupLogging:
    """Test setup_logging()."""

    def test_default_level(self) -> None:
        """Test the configured level is applied."""
        setup_logging(force=True)
        assert logging.getLogger().level == logging.WARNING

    def test_level_override(self) -> None:
        """Test an explicit level wins over settings."""
        setup_logging("debug", force=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_logs_to_stderr(self) -> None:
        """Test diagnostics never go to stdout."""
        setup_logging(force=True)
        streams = [
            h.stream
            for h in logging.getLogger().handlers
            if isinstance(h, logging.StreamHandler)
        ]
        assert sys.stderr in streams
        assert sys.stdout not in streams


class TestHostLogging:
    """Test gostub leaves an embedding program's logging alone."""

    @pytest.fixture
    def host_handler(self):
        handler = logging.StreamHandler()
        root = logging.getLogger()
        root.addHandler(handler)
        yield handler
        root.removeHandler(handler)

    def test_setup_keeps_existing_handlers(self, host_handler) -> None:
        """Test the default setup does not replace installed handlers."""
        setup_logging()
        assert host_handler in logging.getLogger().handlers

    def test_import_keeps_existing_handlers(self, host_handler) -> None:
        """Test importing the logger module does not replace handlers."""
        importlib.reload(logger_module)
        assert host_handler in logging.getLogger().handlers

    def test_force_replaces_handlers(self, host_handler) -> None:
        """Test the command line path takes over the root logger."""
        setup_logging("info", force=True)
        assert host_handler not in logging.getLogger().handlers


class TestFileLogging:
    """Test setup_file_logging()."""

    def test_rotating_handler(self, tmp_path, monkeypatch) -> None:
        """Test a rotating file handler is attached."""
        log_path = tmp_path / "logs" / "gostub.log"
        fake = SimpleNamespace(
            logging=SimpleNamespace(
                file_path=str(log_path),
                file_rotation="daily",
                file_retention_days=3,
                format="text",
            )
        )
        monkeypatch.setattr(logger_module, "settings", fake)

        setup_file_logging(logging.INFO)
        root = logging.getLogger()
        handler = root.handlers[-1]
        try:
            assert log_path.parent.is_dir()
            assert handler.backupCount == 3
            assert handler.level == logging.INFO
        finally:
            root.removeHandler(handler)
            handler.close()


class TestGetLogger:
    """Test get_logger()."""

    def test_get_logger(self) -> None:
        """Test a bound logger is returned."""
        log = get_logger("gostub.test")
        assert hasattr(log, "info")
        assert hasattr(log, "bind")

    def test_bound_context(self) -> None:
        """Test context is carried on every event."""
        with capture_logs() as captured:
            get_logger("gostub.test", interface="Store").warning("Collected")
        assert captured[0]["interface"] == "Store"
        assert captured[0]["event"] == "Collected"
        assert captured[0]["log_level"] == "warning"
