"""
Tests for logging setup.
"""

import logging

import pytest

from passenger_service.utils.logger import setup_logging


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


def test_setup_logging_writes_errors_to_file(tmp_path, monkeypatch, restore_root_logger):
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    logger = setup_logging()
    logging.getLogger("passenger_service.test").error("fan-out failed")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert logger.name == "passenger_service"
    assert logging.getLogger().level == logging.WARNING
    assert "fan-out failed" in (tmp_path / "logs" / "error.log").read_text()
    assert not (tmp_path / "logs" / "debug.log").exists()


def test_setup_logging_debug_log(tmp_path, monkeypatch, restore_root_logger):
    monkeypatch.setenv("LOG_DIR", str(tmp_path))
    monkeypatch.setenv("ENABLE_DEBUG_LOG", "true")

    setup_logging()

    assert (tmp_path / "debug.log").exists()
