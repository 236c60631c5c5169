"""Logging utilities for chirp (thin wrappers).

chirp never configures logging on import. Applications that want chirp's debug
output call :func:`configure_logging` once, or attach their own handlers to the
``chirp`` logger.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

ROOT_LOGGER_NAME = "chirp"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a module logger by name (no prefixing).

    Args:
        name: Logger name (typically ``__name__``).

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)


def _level_value(level: Union[str, int]) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def configure_logging(verbose: bool = False, level: Optional[Union[str, int]] = None) -> None:
    """Attach a stream handler to the ``chirp`` logger and set its level.

    Args:
        verbose: Log at DEBUG when True and no explicit level is given.
        level: Explicit level; defaults to ``logging.level`` from the loaded
            configuration.
    """
    if level is None:
        if verbose:
            level = logging.DEBUG
        else:
            from chirp.config import get_config

            level = get_config().logging.level

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not any(getattr(handler, "_chirp_handler", False) for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._chirp_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.setLevel(_level_value(level))


def set_component_level(component: str, level: Union[str, int]) -> None:
    """Set log level for a single chirp module.

    Accepts either string levels (e.g., "INFO") or numeric constants, and either
    a full logger name or one relative to ``chirp`` (e.g., "registry").
    """
    if component != ROOT_LOGGER_NAME and not component.startswith(f"{ROOT_LOGGER_NAME}."):
        component = f"{ROOT_LOGGER_NAME}.{component}"
    logging.getLogger(component).setLevel(_level_value(level))


__all__ = ["get_logger", "configure_logging", "set_component_level"]
