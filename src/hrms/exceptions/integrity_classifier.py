"""
Classify SQLAlchemy IntegrityErrors by the constraint that failed.

The classification is used by mapper.py to log the failure at the right level
and to attach the constraint name to the raised DataError. Postgres errors are
classified from their SQLSTATE (`pgcode` / `sqlstate`) and diagnostics; other
drivers (SQLite in tests, MySQL) fall back to message matching.
"""
import logging
from enum import Enum
from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)


class IntegrityKind(str, Enum):
    UNIQUE = "unique"
    NOT_NULL = "not_null"
    FOREIGN_KEY = "foreign_key"
    CHECK = "check"
    UNKNOWN = "unknown"


# https://www.postgresql.org/docs/current/errcodes-appendix.html
class PostgresErrorCodes(str, Enum):
    UNIQUE_VIOLATION = "23505"
    NOT_NULL_VIOLATION = "23502"
    FOREIGN_KEY_VIOLATION = "23503"
    CHECK_VIOLATION = "23514"


PGCODE_KIND_MAP = {
    PostgresErrorCodes.UNIQUE_VIOLATION.value: IntegrityKind.UNIQUE,
    PostgresErrorCodes.NOT_NULL_VIOLATION.value: IntegrityKind.NOT_NULL,
    PostgresErrorCodes.FOREIGN_KEY_VIOLATION.value: IntegrityKind.FOREIGN_KEY,
    PostgresErrorCodes.CHECK_VIOLATION.value: IntegrityKind.CHECK,
}

_MESSAGE_KEYWORDS = (
    (IntegrityKind.UNIQUE, ("unique constraint", "unique failed", "unique violation", "duplicate")),
    (IntegrityKind.NOT_NULL, ("not null constraint", "not null", "null value in column", "cannot be null")),
    (IntegrityKind.FOREIGN_KEY, ("foreign key constraint", "foreign key", "is not present in table")),
    (IntegrityKind.CHECK, ("check constraint", "check failed")),
)


def _classify_from_postgres_diag(orig) -> tuple[IntegrityKind | None, str | None]:
    # psycopg 3 exposes `sqlstate`, psycopg2 `pgcode`
    pgcode = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if not pgcode:
        return None, None

    diag = getattr(orig, "diag", None)
    constraint_name = getattr(diag, "constraint_name", None) if diag else None

    kind = PGCODE_KIND_MAP.get(pgcode)
    if kind is not None:
        logger.debug("Postgres integrity diagnostic",
                     extra={"pgcode": pgcode, "constraint_name": constraint_name})
        return kind, constraint_name

    logger.warning("Unknown Postgres integrity error code encountered",
                   extra={"pgcode": pgcode, "constraint_name": constraint_name})
    return IntegrityKind.UNKNOWN, constraint_name


def _classify_from_generic_message(msg: str) -> IntegrityKind:
    normalized = (msg or "").lower()
    for kind, keywords in _MESSAGE_KEYWORDS:
        if any(keyword in normalized for keyword in keywords):
            return kind

    logger.warning("Unknown integrity error message encountered",
                   extra={"message_snippet": normalized[:200]})
    return IntegrityKind.UNKNOWN


def classify_integrity_error(exc: IntegrityError) -> tuple[IntegrityKind, str | None]:
    """
    Returns:
        (IntegrityKind, constraint name if the driver reports one)
    """
    orig = exc.orig

    kind, constraint_name = _classify_from_postgres_diag(orig)
    if kind is not None:
        return kind, constraint_name

    return _classify_from_generic_message(str(orig) if orig is not None else str(exc)), None
