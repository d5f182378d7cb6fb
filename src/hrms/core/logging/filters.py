"""
Logging filters.

RequestIdFilter stamps the id of the request being served on each record.
RedactFilter masks personal data before a record reaches a handler.
"""

import contextvars
import logging
from contextlib import contextmanager
from logging import LogRecord
from typing import Any, Iterator

NO_REQUEST = "-"
REDACTED = "***REDACTED***"

_current_request_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "hrms_request_id", default=None
)


def set_request_id(request_id: str | None) -> contextvars.Token:
    return _current_request_id.set(request_id)


def reset_request_id(token: contextvars.Token) -> None:
    _current_request_id.reset(token)


def get_request_id() -> str | None:
    return _current_request_id.get()


@contextmanager
def request_scope(request_id: str) -> Iterator[str]:
    """Bind `request_id` for the duration of the block (one HTTP request)."""
    token = set_request_id(request_id)
    try:
        yield request_id
    finally:
        reset_request_id(token)


class RequestIdFilter(logging.Filter):
    """
    An explicit `extra={"request_id": ...}` wins over the bound request; records
    logged outside any request get "-".
    """

    def filter(self, record: LogRecord) -> bool:
        if not getattr(record, "request_id", None):
            record.request_id = get_request_id() or NO_REQUEST
        return True


class RedactFilter(logging.Filter):
    # credentials plus the contact columns of branches, candidates and employees
    SENSITIVE = frozenset({
        "password",
        "secret",
        "token",
        "authorization",
        "email",
        "phone",
        "contact_number",
        "address",
    })

    def _mask(self, value: Any) -> Any:
        if isinstance(value, dict):
            return {
                k: REDACTED if str(k).lower() in self.SENSITIVE else self._mask(v)
                for k, v in value.items()
            }
        return value

    def filter(self, record: LogRecord) -> bool:
        for key, value in list(record.__dict__.items()):
            if key.lower() in self.SENSITIVE:
                record.__dict__[key] = REDACTED
            elif isinstance(value, dict):
                record.__dict__[key] = self._mask(value)
        return True
