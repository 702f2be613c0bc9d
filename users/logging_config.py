"""Process-wide logging setup for the users service."""

import logging

LOG_FORMAT = '[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'

_LOGGER_NAMES = ("users", "api")


def configure_logging(level: str = "INFO") -> None:
    """Attach one console handler to the service loggers. Safe to call repeatedly."""
    for name in _LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)

        if not logger.handlers:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(level)
            formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)
