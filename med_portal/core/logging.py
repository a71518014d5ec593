# File: med_portal/core/logging.py

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the ``med_portal`` logger once and return it.

    Module loggers (``logging.getLogger(__name__)``) propagate up to it.
    """
    logger = logging.getLogger("med_portal")
    logger.setLevel(level.upper())

    # Prevent adding multiple handlers if called more than once
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
