"""Test the package logger configuration."""
import logging

from calculator_service.common.logger import LOGGER_NAME, configure_logger


def test_configure_logger_sets_level() -> None:
    """The level name is applied to the package logger."""
    package_logger = configure_logger("warning")
    assert package_logger.name == LOGGER_NAME
    assert package_logger.level == logging.WARNING
    configure_logger("INFO")


def test_configure_logger_does_not_duplicate_handlers() -> None:
    """Repeated configuration keeps a single handler."""
    configure_logger("INFO")
    package_logger = configure_logger("DEBUG")
    assert len(package_logger.handlers) == 1
    configure_logger("INFO")
