import logging

import pytest

from field_explorer.logging_config import setup_logging


@pytest.fixture
def logger():
    logger = logging.getLogger("field_explorer")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_setup_is_idempotent(logger):
    first = setup_logging(logging.DEBUG)
    console = first.handlers[0]
    again = setup_logging(logging.DEBUG)
    assert again is logger
    assert again.level == logging.DEBUG
    assert again.handlers == [console]


def test_rerun_updates_level(logger):
    setup_logging(logging.DEBUG)
    setup_logging("WARNING")
    assert logger.level == logging.WARNING
    assert logger.handlers[0].level == logging.WARNING


def test_foreign_handlers_survive_reruns(logger):
    foreign = logging.NullHandler()
    logger.addHandler(foreign)
    setup_logging()
    setup_logging()
    assert foreign in logger.handlers
    assert len(logger.handlers) == 2


def test_file_handler(logger, tmp_path):
    log_file = tmp_path / "explorer.log"
    setup_logging("INFO", str(log_file))
    setup_logging("INFO", str(log_file))
    assert len(logger.handlers) == 2

    logging.getLogger("field_explorer.sampler").info("sampled grid")
    for handler in logger.handlers:
        handler.flush()
    assert "field_explorer.sampler - INFO - sampled grid" in log_file.read_text(encoding="utf-8")


def test_file_handler_dropped_when_unset(logger, tmp_path):
    setup_logging("INFO", str(tmp_path / "explorer.log"))
    setup_logging("INFO")
    assert len(logger.handlers) == 1
    assert not isinstance(logger.handlers[0], logging.FileHandler)
