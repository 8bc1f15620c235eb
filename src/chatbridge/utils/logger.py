import logging
import os
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s: %(message)s"


def setup_logger(name: str = "chatbridge", level: str | None = None) -> logging.Logger:
    """Configure the package logger once; client modules log beneath it."""
    level = (level or os.getenv("CHATBRIDGE_LOG_LEVEL", "INFO")).upper()
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False
    if logger.handlers:
        return logger  # avoid duplicate handlers

    # Under uvicorn, share its console handlers instead of adding our own
    uvicorn_logger = logging.getLogger("uvicorn.error")
    if uvicorn_logger.handlers:
        for h in uvicorn_logger.handlers:
            logger.addHandler(h)
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
