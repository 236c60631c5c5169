"""Tests for logging helpers."""

import logging

import pytest

from chirp import Attribute, Base, ObjectAttribute
from chirp.config import ChirpConfig, LoggingConfig, set_config
from chirp.utils.logging import configure_logging, get_logger, set_component_level


@pytest.fixture
def chirp_logger():
    logger = logging.getLogger("chirp")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logging.getLogger("chirp.registry").setLevel(logging.NOTSET)


def test_get_logger_returns_named_logger():
    assert get_logger("chirp.base") is logging.getLogger("chirp.base")


def test_configure_logging_uses_config_level(chirp_logger):
    set_config(ChirpConfig(logging=LoggingConfig(level="ERROR")))
    configure_logging()
    assert chirp_logger.level == logging.ERROR


def test_configure_logging_verbose_and_explicit_level(chirp_logger):
    configure_logging(verbose=True)
    assert chirp_logger.level == logging.DEBUG
    configure_logging(level="info")
    assert chirp_logger.level == logging.INFO


def test_configure_logging_installs_one_handler(chirp_logger):
    configure_logging()
    configure_logging()
    installed = [h for h in chirp_logger.handlers if getattr(h, "_chirp_handler", False)]
    assert len(installed) == 1


def test_set_component_level_accepts_short_names(chirp_logger):
    set_component_level("registry", "debug")
    assert logging.getLogger("chirp.registry").level == logging.DEBUG
    set_component_level("chirp.registry", logging.WARNING)
    assert logging.getLogger("chirp.registry").level == logging.WARNING


def test_null_substitution_and_unknown_lookup_are_logged(caplog):
    class Message(Base, register=False):
        body = Attribute()
        sender = ObjectAttribute("Nobody")

    message = Message({})
    with caplog.at_level(logging.DEBUG, logger="chirp"):
        assert not message.sender
        assert message["recipient"] is None

    assert "substituting the null object" in caplog.text
    assert "has no field 'recipient'" in caplog.text
