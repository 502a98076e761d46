"""
Tests for logging configuration — level resolution and handler setup.
"""

import logging

import pytest

from drupal_setup.core.observability.logging_config import resolve_level, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestResolveLevel:
    def test_default(self):
        assert resolve_level() == "WARNING"

    def test_env_level(self):
        assert resolve_level(env_level="INFO") == "INFO"

    @pytest.mark.parametrize(
        ("flags", "expected"),
        [
            ({"debug": True, "verbose": True, "quiet": True}, "DEBUG"),
            ({"verbose": True, "quiet": True}, "INFO"),
            ({"quiet": True}, "ERROR"),
        ],
    )
    def test_flags_beat_env(self, flags: dict, expected: str):
        assert resolve_level(env_level="CRITICAL", **flags) == expected


class TestSetupLogging:
    def test_console_level(self):
        setup_logging(level="INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert root.handlers[0].level == logging.INFO

    def test_unknown_level_falls_back(self):
        setup_logging(level="LOUD")
        assert logging.getLogger().level == logging.WARNING

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "install.log"
        setup_logging(level="WARNING", log_file=str(log_file), log_file_level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2

        logging.getLogger("drupal_setup.test").debug("ran ddev start")
        for handler in root.handlers:
            handler.flush()
        assert "ran ddev start" in log_file.read_text(encoding="utf-8")

