"""
Errors raised by repositories, services and routers.

Each error knows its HTTP status and its JSON body, so the FastAPI handlers in
api/v1/error_handlers.py render them without a lookup table. Nothing between
the repository and the handler re-wraps a RepositoryError.
"""

from typing import Iterable


class RepositoryError(Exception):
    """
    Base class for application errors.

    Subclasses set `status` and `code`; a plain RepositoryError is a 400 unless
    a status is passed explicitly.

    Attributes:
        message: text returned to the client in the envelope's `message`
        fields: request fields the error relates to, e.g. ["candidate_id"]
        constraint: database constraint name; logged, never returned
    """

    status: int = 400
    code: str | None = None

    def __init__(self, message: str, status_code: int | None = None, *,
                 fields: Iterable[str] | None = None, constraint: str | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code if status_code is not None else self.status
        self.fields = list(fields) if fields else None
        self.constraint = constraint

    @property
    def error_code(self) -> str | None:
        return self.code

    def __str__(self) -> str:
        details = []
        if self.fields:
            details.append(f"fields: {', '.join(self.fields)}")
        if self.constraint:
            details.append(f"constraint: {self.constraint}")
        if self.code:
            details.append(f"code: {self.code}")
        return f"{self.message} ({'; '.join(details)})" if details else self.message

    def to_payload(self) -> dict:
        """The `{message, data}` envelope with an optional `code` and `fields`."""
        payload = {"message": self.message, "data": None}
        if self.code:
            payload["code"] = self.code
        if self.fields:
            payload["fields"] = list(self.fields)
        return payload

    def http_status(self) -> int:
        return self.status_code


class NotFoundError(RepositoryError):
    """A requested record, or one referenced by a foreign key, does not exist."""

    status = 404
    code = "not_found"

    def __init__(self, message: str = "Not found", *, fields: Iterable[str] | None = None):
        super().__init__(message, fields=fields)


class DataError(RepositoryError):
    """The database rejected an insert, update or delete."""

    status = 500
    code = "data_error"

    def __init__(self, message: str, *, fields: Iterable[str] | None = None, constraint: str | None = None):
        super().__init__(message, fields=fields, constraint=constraint)


class ServiceUnavailableError(RepositoryError):
    """A read or list query failed."""

    status = 503
    code = "unavailable"

    def __init__(self, message: str):
        super().__init__(message)


class InvalidFieldError(RepositoryError):
    """An update payload names no column the entity has."""

    status = 422
    code = "invalid_field"

    def __init__(self, message: str, *, fields: Iterable[str] | None = None):
        super().__init__(message, fields=fields)


__all__ = [
    "RepositoryError",
    "NotFoundError",
    "DataError",
    "ServiceUnavailableError",
    "InvalidFieldError",
]
