"""Logging helpers.

Security:
    - We never log raw CPF numbers. Log the verdict and the input length only.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Return the named logger with one cpfcheck stream handler attached.

    Calling it again for the same name reuses the existing handler and only
    updates the level.
    """
    logger = logging.getLogger(name)
    if not any(getattr(h, "_cpfcheck", False) for h in logger.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        stream_handler._cpfcheck = True  # type: ignore[attr-defined]
        logger.addHandler(stream_handler)
    logger.setLevel(level)
    return logger
