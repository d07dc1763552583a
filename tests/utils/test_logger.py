# -*- coding: utf-8 -*-
"""
Tests for the logging setup.
"""
import logging

import pytest

from app.config import Config
from utils import logger as logger_module


@pytest.fixture
def log_config(tmp_path, monkeypatch):
    monkeypatch.setattr(Config, "LOGS_DIR", tmp_path / "logs")
    yield tmp_path / "logs"
    # Leave a default logger behind for the other tests
    monkeypatch.undo()
    logger_module.setup_logger()


def handler_levels(logger):
    return {type(h).__name__: h.level for h in logger.handlers}


def test_levels_come_from_config(log_config, monkeypatch):
    monkeypatch.setattr(Config, "LOG_LEVEL", "warning")
    monkeypatch.setattr(Config, "CONSOLE_LOG_LEVEL", "ERROR")

    logger = logger_module.setup_logger()

    assert handler_levels(logger) == {
        "RotatingFileHandler": logging.WARNING,
        "StreamHandler": logging.ERROR,
    }
    assert logger.level == logging.WARNING
    assert (log_config / Config.LOG_FILE).exists()


def test_explicit_levels_win(log_config):
    logger = logger_module.setup_logger(level="INFO", console_level=logging.DEBUG)

    assert handler_levels(logger)["RotatingFileHandler"] == logging.INFO
    assert logger.level == logging.DEBUG


def test_unknown_level_falls_back(log_config, monkeypatch):
    monkeypatch.setattr(Config, "LOG_LEVEL", "chatty")

    logger = logger_module.setup_logger()

    assert handler_levels(logger)["RotatingFileHandler"] == logging.DEBUG


def test_file_uses_configured_format(log_config, monkeypatch):
    monkeypatch.setattr(Config, "LOG_FORMAT", "%(levelname)s::%(message)s")
    logger_module.setup_logger()

    logger_module.get_logger("tests").warning("disk almost full")
    for handler in logging.getLogger(logger_module.ROOT_LOGGER_NAME).handlers:
        handler.flush()

    content = (log_config / Config.LOG_FILE).read_text(encoding="utf-8")
    assert "WARNING::disk almost full" in content
