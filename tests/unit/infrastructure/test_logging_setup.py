"""Tests for logging setup."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from azurerm_plugin.config import LogDestination, LoggingConfig
from azurerm_plugin.infrastructure.logging import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.unit
class TestSetupLogging:

    def test_file_destination(self, tmp_path):
        log_path = tmp_path / "logs" / "plugin.log"
        config = LoggingConfig(
            level="debug",
            destination=LogDestination.FILE,
            file={"path": str(log_path), "max_size_mb": 1, "backup_count": 2},
        )

        setup_logging(config)
        get_logger("azurerm_plugin.tests").info("Resource read", resource_id="/subscriptions/sub")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert [type(h) for h in root.handlers] == [RotatingFileHandler]
        for handler in root.handlers:
            handler.flush()
        contents = log_path.read_text()
        assert "event='Resource read'" in contents
        assert "resource_id='/subscriptions/sub'" in contents

    def test_both_destinations(self, tmp_path):
        config = LoggingConfig(destination=LogDestination.BOTH, file={"path": str(tmp_path / "plugin.log")})

        setup_logging(config)

        assert len(logging.getLogger().handlers) == 2

    def test_invalid_level(self):
        with pytest.raises(ValueError):
            LoggingConfig(level="verbose")
