"""
Logging setup driven by Settings.
"""

import logging

from src.config.settings import Settings


def configure_logging(settings: Settings) -> None:
    """
    Apply the configured level and format to the root logger.

    Handlers already attached by a host application keep their place but
    take on the configured format; without handlers a stream handler is added.
    """
    level = settings.log_level.upper()
    root = logging.getLogger()
    if root.handlers:
        formatter = logging.Formatter(settings.log_format)
        for handler in root.handlers:
            handler.setFormatter(formatter)
        root.setLevel(level)
    else:
        logging.basicConfig(level=level, format=settings.log_format)
    logging.getLogger(__name__).debug("Logging configured at %s", level)
