#!/usr/bin/env python3
"""
Tests for logging setup
"""

import json
import logging

import pytest

from pixel_engine.core.pixel_engine_settings import SettingsManager
from pixel_engine.logging_config import (
    ROOT_LOGGER_NAME,
    get_logger,
    setup_logging,
    setup_logging_from_settings,
)


@pytest.mark.unit
class TestLoggingConfig:
    """Test setup_logging and get_logger"""

    def test_setup_console(self):
        logger = setup_logging("DEBUG")

        assert logger.name == "pixel_engine"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_repeated_setup_replaces_handlers(self):
        setup_logging()
        logger = setup_logging()

        assert len(logger.handlers) == 1

    def test_unknown_level_defaults_to_info(self):
        assert setup_logging("chatty").level == logging.INFO

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "engine.log"
        logger = setup_logging("INFO", str(log_file))

        get_logger("core.fill").info("hello")
        for handler in logger.handlers:
            handler.flush()

        assert "pixel_engine.core.fill - INFO - hello" in log_file.read_text()

    def test_get_logger_is_child(self):
        root = logging.getLogger("pixel_engine")
        assert get_logger("cli").parent is root

    def test_unknown_level_warns(self, capsys):
        setup_logging("chatty")

        assert "Unknown log level 'chatty'" in capsys.readouterr().out

    def test_level_from_settings(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"log_level": "DEBUG"}))

        logger = setup_logging_from_settings(SettingsManager(path))

        assert logger.level == logging.DEBUG

    def test_explicit_level_overrides_settings(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"log_level": "DEBUG"}))

        logger = setup_logging_from_settings(SettingsManager(path), "WARNING")

        assert logger.level == logging.WARNING

    def test_module_loggers_share_root(self):
        assert get_logger("core.fill").name == f"{ROOT_LOGGER_NAME}.core.fill"
