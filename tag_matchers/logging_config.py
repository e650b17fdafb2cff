"""
Logging setup for tag matchers.
"""

import logging
from typing import Optional, Union

from .config import get_settings

LOGGER_NAME = "tag_matchers"
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Configure the package logger.

    Args:
        level: Log level to apply. Defaults to the configured ``log_level`` setting.

    Returns:
        logging.Logger: The ``tag_matchers`` logger
    """
    if level is None:
        level = get_settings().log_level

    logging.basicConfig(level=level, format=LOG_FORMAT)

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level)
    return package_logger
