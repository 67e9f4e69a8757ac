"""Logging configuration for the catalog service."""

import logging
import sys

from catalog.core.config import Settings, get_settings


def setup_logging(settings: Settings | None = None) -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO.
    Output goes to stdout. httpx request logging is kept at WARNING
    unless debug_traffic is enabled.

    Args:
        settings: Settings to read; the cached environment settings when None.
    """
    settings = settings or get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("httpx").setLevel(
        logging.DEBUG if settings.debug_traffic else logging.WARNING
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
