# src/hrms/core/logging/builder.py
"""
Turn Settings into a logging.dictConfig mapping and apply it.

`setup_logging(settings)` runs once from the FastAPI lifespan; modules only
ever call `logging.getLogger(__name__)`.
"""

import logging
import logging.config
from pathlib import Path

from hrms.config.settings import Settings

from .filters import RedactFilter, RequestIdFilter
from .formatters import ColorFormatter, JsonFormatter
from .handlers import build_handlers, writes_files

TEXT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(request_id)s | %(message)s"


def _formatters(settings: Settings) -> dict:
    return {
        "standard": {
            "()": ColorFormatter if settings.LOG_FORMAT == "text" else logging.Formatter,
            "format": TEXT_FORMAT,
        },
        "json": {"()": JsonFormatter, "env": settings.ENV},
    }


def _loggers(settings: Settings, handler_names: list[str]) -> dict:
    return {
        "": {"handlers": handler_names, "level": settings.LOG_LEVEL},
        "uvicorn.error": {"handlers": handler_names, "level": settings.LOG_LEVEL, "propagate": False},
        "uvicorn.access": {"handlers": ["console"], "level": "INFO", "propagate": False},
        # statements and bound parameters carry personal data from HR tables
        "sqlalchemy.engine": {
            "handlers": ["console"],
            "level": "DEBUG" if settings.ENABLE_SQL_LOGGING else "WARNING",
            "propagate": False,
        },
    }


def make_dict_config(settings: Settings) -> dict:
    handlers = build_handlers(settings)
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": _formatters(settings),
        "filters": {
            "request_id": {"()": RequestIdFilter},
            "redact": {"()": RedactFilter},
        },
        "handlers": handlers,
        "loggers": _loggers(settings, list(handlers)),
    }


def setup_logging(settings: Settings) -> None:
    """
    Create LOG_DIR when files are written, apply the config, and put a
    RequestIdFilter on the root logger as well so `%(request_id)s` resolves for
    handlers attached later (pytest's caplog, for instance).
    """
    if writes_files(settings):
        Path(settings.LOG_DIR).mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(make_dict_config(settings))
    logging.getLogger().addFilter(RequestIdFilter())
