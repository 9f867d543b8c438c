from __future__ import annotations

import logging

PACKAGE_LOGGER = "src.persistence"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# PUBLIC_INTERFACE
def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Attach a stream handler to the package logger and set its level.

    Safe to call repeatedly: the handler is only added once.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if not any(getattr(h, "_persistence_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._persistence_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
