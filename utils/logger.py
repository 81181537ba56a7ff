# utils/logger.py

import logging

from config import LOG_LEVEL


def setup_logger(name="url_chat"):
    """
    Central logging setup so we don’t rely on print() everywhere.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            "%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, str(LOG_LEVEL).upper(), logging.INFO))
    return logger
