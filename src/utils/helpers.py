import logging
import sys

from src.config import DEFAULT_LOG_LEVEL


def setup_logging(logger_name, level=None):
    """Configure console logging for a script entry point.

    Library modules only create loggers; scripts call this once.
    """
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    logger = logging.getLogger(logger_name)
    logger.setLevel(level or DEFAULT_LOG_LEVEL)

    # Avoid duplicate handlers when called twice
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger
