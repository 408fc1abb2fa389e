import logging

from jobboard.core.config import settings


def get_logger(name: str) -> logging.Logger:
    """
    Return a named ``jobboard.*`` logger with a console handler.

    The handler is attached once per logger so repeated imports do not
    duplicate output.
    """
    logger = logging.getLogger(f"jobboard.{name}")
    logger.setLevel(settings.LOG_LEVEL.upper())

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        ))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
