"""
Map SQLAlchemy failures raised inside repository operations to app-level errors.

Usage:
    async with db_error_handler(self.db, "Branch", "Error creating branch"):
        ... DB ops ...

    async with db_error_handler(self.db, "Branch", "Error retrieving branches",
                                error_cls=ServiceUnavailableError):
        ... read queries ...

Writes surface as DataError (500) with the driver's message appended; reads
surface as ServiceUnavailableError (503) with the plain message. A
RepositoryError raised inside the block (e.g. NotFoundError from an existence
check) passes through untouched so its status survives.
"""
import logging
from contextlib import asynccontextmanager
from typing import Type

from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from .base import DataError, RepositoryError
from .integrity_classifier import IntegrityKind, classify_integrity_error

logger = logging.getLogger(__name__)


def describe_db_error(exc: SQLAlchemyError) -> str:
    """
    The driver-level message of a SQLAlchemy error, without SQLAlchemy's
    statement/parameters suffix.
    """
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig).strip()
    return str(exc).strip()


async def _safe_rollback(db: AsyncSession, model_name: str | None) -> None:
    try:
        await db.rollback()
    except SQLAlchemyError:
        logger.exception("Failed to rollback session", extra={"model": model_name})


def _build_error(error_cls: Type[RepositoryError], message: str, exc: SQLAlchemyError,
                 constraint: str | None = None) -> RepositoryError:
    if error_cls is DataError:
        return DataError(f"{message}: {describe_db_error(exc)}", constraint=constraint)
    return error_cls(message)


@asynccontextmanager
async def db_error_handler(
    db: AsyncSession,
    model_name: str | None,
    message: str,
    *,
    error_cls: Type[RepositoryError] = DataError,
):
    """
    Roll back on SQLAlchemy errors and raise `error_cls` built from `message`.
    """
    try:
        yield
    except RepositoryError:
        raise
    except IntegrityError as exc:
        await _safe_rollback(db, model_name)
        kind, constraint_name = classify_integrity_error(exc)
        # constraint violations are caller-data problems, not server faults
        log = logger.warning if kind is IntegrityKind.UNKNOWN else logger.info
        log(
            "mapper.integrity_violation",
            extra={"model": model_name, "kind": kind.value, "constraint": constraint_name},
        )
        raise _build_error(error_cls, message, exc, constraint_name) from exc
    except SQLAlchemyError as exc:
        await _safe_rollback(db, model_name)
        logger.exception("mapper.database_error", extra={"model": model_name})
        raise _build_error(error_cls, message, exc) from exc
