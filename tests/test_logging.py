import logging

import pytest

from backgen.utils.logging import configure_logging, init_logging, logger


@pytest.fixture(autouse=True)
def _restore_logger():
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


def _streams():
    return [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]


def test_init_logging_levels():
    init_logging("debug")
    assert logger.level == logging.DEBUG and len(_streams()) == 1
    init_logging("error")
    assert logger.level == logging.ERROR and len(_streams()) == 1
    init_logging(logging.INFO)
    assert logger.level == logging.INFO
    init_logging("unknown")
    assert logger.level == logging.WARNING


def test_none_silences_warnings(capsys):
    init_logging("warning")
    init_logging("none")
    assert not _streams()
    assert not logger.isEnabledFor(logging.ERROR)
    logger.warning("should not be printed")
    assert capsys.readouterr().err == ""


def test_configure_logging_can_be_reenabled(capsys):
    configure_logging(enabled=False)
    init_logging("info")
    logger.info("visible")
    assert "visible" in capsys.readouterr().err
