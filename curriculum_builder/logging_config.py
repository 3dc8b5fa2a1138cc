import logging
from logging.config import dictConfig
from typing import Optional

from .config import Settings, get_settings

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

PARSER_LOGGERS = (
    "curriculum_builder.challenge_parser",
    "curriculum_builder.translation",
)


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure build logging from ``CURRICULUM_LOG_LEVEL`` and ``CURRICULUM_DEBUG_PARSER``."""
    settings = settings or get_settings()

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": DEFAULT_LOG_FORMAT,
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                },
            },
            "root": {
                "handlers": ["default"],
                "level": settings.log_level.upper(),
            },
            "loggers": {
                name: {"level": "DEBUG" if settings.debug_parser else "NOTSET"} for name in PARSER_LOGGERS
            },
        }
    )
