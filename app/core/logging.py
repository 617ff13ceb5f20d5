# app/core/logging.py
import logging

DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str | int = "INFO", fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """Attach a stream handler to the ``app`` logger once and set its level."""
    logger = logging.getLogger("app")
    if not logger.handlers:
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter(fmt))
        logger.addHandler(ch)
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    return logger
