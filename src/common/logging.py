"""
Logging configuration helpers.
Modules log through named loggers (`contracts`, `state`, `dashboard`); this
module only wires the root handler once per process.
"""

from __future__ import annotations

import logging

from src.common.settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LOGGING_CONFIGURED = False


def configure_logging() -> None:
    """Configure process-wide logging from environment settings."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    settings = get_settings()
    level = getattr(logging, settings.LOG_LEVEL, logging.INFO)

    logging.basicConfig(level=level, format=LOG_FORMAT)
    _LOGGING_CONFIGURED = True
