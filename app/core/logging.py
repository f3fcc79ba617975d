"""
Logging configuration.

Modules log through ``logging.getLogger(__name__)``; this sets up the
handlers once at application startup.
"""

import logging.config

from app.core.config import settings


def configure_logging(level: str | None = None) -> None:
    """Configure the root and ``app`` loggers."""
    level = (level or settings.LOG_LEVEL).upper()
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
            },
        },
        "loggers": {
            "app": {"level": level, "handlers": ["console"], "propagate": False},
        },
        "root": {"level": "WARNING", "handlers": ["console"]},
    })
