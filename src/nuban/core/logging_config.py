"""Logging setup for the ``nuban`` logger hierarchy.

The library itself only emits records through ``logging.getLogger(__name__)``;
applications call :func:`configure_logging` when they want them on a stream.
"""

from __future__ import annotations

import logging

from nuban.core.config import NubanSettings

LOGGER_NAME = "nuban"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: NubanSettings | None = None) -> logging.Logger:
    """Attach a single stream handler to the ``nuban`` logger.

    Args:
        settings: Source of ``log_level``. Defaults to ``NubanSettings()``.

    Returns:
        The configured ``nuban`` logger.
    """
    if settings is None:
        settings = NubanSettings()

    logger = logging.getLogger(LOGGER_NAME)

    # Replace rather than stack handlers on repeated calls
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(settings.log_level.upper())
    logger.propagate = False

    return logger
