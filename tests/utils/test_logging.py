import logging

from geodist.utils.logging import LOGGER


def test_logger():
    assert LOGGER.name == 'geodist'
    assert LOGGER.level == logging.WARNING
    assert any(isinstance(x, logging.StreamHandler) for x in LOGGER.handlers)


def test_logger_emits(caplog):
    LOGGER.warning('test')
    assert 'test' in caplog.text
