"""Logging setup."""

import logging
import logging.config

from wikiguard.config import Settings

# Third-party loggers that are noisy at INFO.
QUIET_LOGGERS = ("psycopg", "psycopg.pool")


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings. DEBUG when settings.debug is set."""
    level = "DEBUG" if settings.debug else settings.log_level.upper()
    if level not in logging.getLevelNamesMapping():
        level = "INFO"

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stderr",
                },
            },
            "root": {"level": level, "handlers": ["console"]},
            "loggers": {name: {"level": "WARNING"} for name in QUIET_LOGGERS},
        }
    )
