"""Logging setup for the control plane."""

import logging
from typing import Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Union[int, str] = "INFO") -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Calling it again only updates the level, so repeated app construction
    (tests, reloads) does not duplicate output.
    """
    logger = logging.getLogger("ccr_control")
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    if not any(getattr(h, "_ccr_control", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._ccr_control = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
