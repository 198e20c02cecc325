"""Log output for callers that have no logging setup of their own."""

from __future__ import annotations

import logging
from typing import Final

from .env import env_name, optional_setting
from .errors import ConfigurationError

PACKAGE_LOGGER: Final[str] = "resmerger"
HANDLER_NAME: Final[str] = "resmerger-stderr"
LOG_FORMAT: Final[str] = "%(levelname)s %(name)s: %(message)s"


def get_log_level() -> int:
    """Return the level named by ``RESMERGER_LOG_LEVEL``, ``INFO`` when unset."""

    name = optional_setting("log_level")
    if name is None:
        return logging.INFO
    level = logging.getLevelNamesMapping().get(name.upper())
    if level is None:
        raise ConfigurationError(env_name("log_level"), f"unknown log level {name!r}")
    return level


def configure_logging(*, level: int | None = None) -> logging.Handler:
    """Send ``resmerger`` records to stderr.

    The package only logs through module loggers and never calls this
    itself. It exists for build tools embedding the merger without their own
    logging configuration. The root logger is left alone. Calling it again
    replaces the handler added earlier.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            logger.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(get_log_level() if level is None else level)
    return handler
