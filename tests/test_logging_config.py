import logging

import pytest

from account_api.app.core.logging_config import setup_logging


@pytest.fixture
def bare_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers.clear()
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_setup_logging_adds_console_and_file_handlers(bare_root_logger, tmp_path):
    logfile = tmp_path / "api.log"

    setup_logging("debug", str(logfile))
    logging.getLogger("account_api.test").debug("hello")

    assert bare_root_logger.level == logging.DEBUG
    assert len(bare_root_logger.handlers) == 2
    assert "[DEBUG] account_api.test: hello" in logfile.read_text(encoding="utf-8")
    assert logging.getLogger("aiosmtplib").level == logging.WARNING


def test_setup_logging_runs_once(bare_root_logger):
    setup_logging("INFO")
    setup_logging("DEBUG")

    assert len(bare_root_logger.handlers) == 1
    assert bare_root_logger.level == logging.INFO


def test_unknown_level_falls_back_to_info(bare_root_logger):
    setup_logging("chatty")
    assert bare_root_logger.level == logging.INFO
