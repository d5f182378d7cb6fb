# src/hrms/core/logging/formatters.py

"""
Log formatters.

JsonFormatter writes one object per line for the log collector; the event name
is the message and everything passed through `extra` (model, id, page,
duration_ms, ...) becomes a top-level key.

ColorFormatter is for a developer terminal: a colored level column followed by
the event and a compact `key=value` tail built from the same extras.
"""

import json
import logging
from logging import LogRecord
from typing import Any, Iterator

from hrms.utils.logging import service_info

# attributes present on every LogRecord; anything else arrived through `extra`
_STANDARD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "request_id"}


def iter_extras(record: LogRecord) -> Iterator[tuple[str, Any]]:
    for key, value in record.__dict__.items():
        if key in _STANDARD_ATTRS or key.startswith("_"):
            continue
        yield key, value


def _jsonable(value: Any) -> Any:
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return str(value)
    return value


class JsonFormatter(logging.Formatter):
    """
    Args:
        env: deployment environment written on every line
        service: service name; defaults to the installed distribution name
        datefmt: forwarded to logging.Formatter
    """

    def __init__(self, *, env: str | None = None, service: str | None = None, datefmt: str | None = None):
        super().__init__(datefmt=datefmt)
        info = service_info()
        self.env = env
        self.service = service or info.name
        self.version = info.version

    def format(self, record: LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", "-"),
            "service": self.service,
            "env": self.env,
            "version": self.version,
            "source": f"{record.pathname}:{record.lineno}",
        }

        for key, value in iter_extras(record):
            payload.setdefault(key, _jsonable(value))

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


class ColorFormatter(logging.Formatter):
    """TIME | LEVEL | LOGGER | REQUEST_ID | event key=value ..."""

    LEVEL_COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[1;41m",
    }
    RESET = "\033[0m"

    def format(self, record: LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelname, "")
        context = " ".join(f"{key}={value}" for key, value in iter_extras(record))

        line = (
            f"{self.formatTime(record, self.datefmt)} | "
            f"{color}{record.levelname:<8}{self.RESET} | "
            f"{record.name:<32} | "
            f"{getattr(record, 'request_id', '-'):<36} | "
            f"{record.getMessage()}"
        )
        if context:
            line = f"{line} {context}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line
