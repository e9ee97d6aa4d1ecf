"""Application-wide logger."""
import logging
import sys

LOGGER_NAME = "calculator_service"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(threadName)s | %(message)s"


def configure_logger(level: str = "INFO") -> logging.Logger:
    """
    Attach a stream handler to the package logger and set its level.

    Calling it again only updates the level, handlers are never duplicated.

    :param str level: Logging level name (DEBUG, INFO, WARNING, ...)

    :return: The configured package logger
    :rtype: logging.Logger
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    package_logger.setLevel(level.upper())
    return package_logger


logger: logging.Logger = configure_logger()
