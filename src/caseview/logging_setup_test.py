"""
Tests for logging setup.

Run with: pytest src/caseview/logging_setup_test.py -v
"""

import logging

import pytest
from rich.logging import RichHandler

from caseview.logging_setup import setup_logging


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers, level = list(root_logger.handlers), root_logger.level
    yield root_logger
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging()"""

    def test_level_by_name(self, restore_root_logger):
        setup_logging("debug")

        assert restore_root_logger.level == logging.DEBUG
        assert isinstance(restore_root_logger.handlers[0], RichHandler)

    def test_unknown_level_falls_back_to_info(self, restore_root_logger):
        setup_logging("chatty")

        assert restore_root_logger.level == logging.INFO

    def test_log_file(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "caseview.log"

        setup_logging(logging.WARNING, log_file)
        logging.getLogger("caseview.test").warning("written to file")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert "written to file" in log_file.read_text()
