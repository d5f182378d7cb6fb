"""
Handler definitions for logging.dictConfig.

| LOG_TO_STDOUT | LOG_DIR set | handlers                   |
| ------------- | ----------- | -------------------------- |
| true          | any         | console, error_console     |
| false         | no          | console, error_console     |
| false         | yes         | console, file, error_file  |
"""

from pathlib import Path

from hrms.config.settings import Settings

APP_LOG = "hrms.log"
ERROR_LOG = "errors.log"
FILTERS = ("request_id", "redact")


def writes_files(settings: Settings) -> bool:
    return not settings.LOG_TO_STDOUT and bool(settings.LOG_DIR)


def _stream(level: str, formatter: str) -> dict:
    return {
        "class": "logging.StreamHandler",
        "level": level,
        "formatter": formatter,
        "filters": list(FILTERS),
    }


def _rotating(settings: Settings, filename: str, level: str, formatter: str) -> dict:
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "level": level,
        "formatter": formatter,
        "filters": list(FILTERS),
        "filename": str(Path(settings.LOG_DIR) / filename),
        "maxBytes": settings.LOG_MAX_BYTES,
        "backupCount": settings.LOG_BACKUP_COUNT,
        "encoding": "utf-8",
    }


def build_handlers(settings: Settings) -> dict[str, dict]:
    """Handler name -> dictConfig entry, in the order they are attached to root."""
    formatter = "json" if settings.LOG_FORMAT == "json" else "standard"
    handlers = {"console": _stream(settings.LOG_LEVEL, formatter)}

    # errors are always written as JSON so they can be shipped as-is
    if writes_files(settings):
        handlers["file"] = _rotating(settings, APP_LOG, settings.LOG_LEVEL, formatter)
        handlers["error_file"] = _rotating(settings, ERROR_LOG, "ERROR", "json")
    else:
        handlers["error_console"] = _stream("ERROR", "json")
    return handlers
