"""Default logging setup for hosts embedding ecosim.

Library modules only create loggers; nothing here runs on import. Hosts
that already configure logging should not call ``configure_logging``.
"""

from __future__ import annotations

import logging
from typing import Iterable, Union

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATEFMT = "%H:%M:%S"
PACKAGE_LOGGER = "ecosim"


def configure_logging(
    *,
    level: Union[str, int] = "INFO",
    fmt: str = LOG_FORMAT,
    datefmt: str = LOG_DATEFMT,
    extra_loggers: Iterable[str] = (),
) -> logging.Logger:
    """Attach a stream handler to the root logger and set ecosim's level.

    Args:
        level: Level name (any case) or numeric level.
        fmt: Record format for the root handler.
        datefmt: Timestamp format for the root handler.
        extra_loggers: Host logger names to set to the same level, e.g. the
            simulation loop that drives the cascade pass.

    Returns:
        The ``ecosim`` package logger.
    """
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=fmt, datefmt=datefmt)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for name in extra_loggers:
        logging.getLogger(name).setLevel(level)

    package_logger.debug("ecosim logging configured at %s", logging.getLevelName(package_logger.level))
    return package_logger
