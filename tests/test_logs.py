import logging

import pytest
from textual.logging import TextualHandler

from source_explorer.logs import configure_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("source_explorer")
    saved = (logger.level, list(logger.handlers), logger.propagate)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(saved[0])
    for handler in saved[1]:
        logger.addHandler(handler)
    logger.propagate = saved[2]


def test_routes_records_to_textual(package_logger):
    logger = configure_logging("INFO")

    assert logger is package_logger
    assert logger.level == logging.INFO
    assert [type(handler) for handler in logger.handlers] == [TextualHandler]


def test_writes_to_a_log_file(package_logger, tmp_path):
    log_file = tmp_path / "explorer.log"
    configure_logging(logging.DEBUG, str(log_file))

    logging.getLogger("source_explorer.registry").debug("closed tab %d", 3)
    for handler in package_logger.handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "DEBUG source_explorer.registry: closed tab 3" in text


def test_reconfiguring_replaces_handlers(package_logger, tmp_path):
    configure_logging("INFO", str(tmp_path / "a.log"))
    configure_logging("INFO")

    assert len(package_logger.handlers) == 1
