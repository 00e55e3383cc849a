"""Logging setup for the sieledger command line."""

import logging
from typing import Any

_LOGGER_NAME = "sieledger"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO, stream: Any = None) -> logging.Logger:
    """Attach a stream handler to the sieledger logger hierarchy.

    Calling it again only updates the level.

    Args:
        level: Log level for the sieledger loggers
        stream: Target stream; defaults to stderr

    Returns:
        The sieledger root logger
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)

    if not any(getattr(h, "_sieledger_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._sieledger_handler = True
        logger.addHandler(handler)

    return logger
