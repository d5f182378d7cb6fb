"""
Helpers that turn raw list inputs (query-string text) into SQLAlchemy
predicates. Each helper returns None when its input should not filter
anything, so callers can collect the results and drop the Nones.
"""
import logging
from datetime import date, datetime, time
from typing import Any

from sqlalchemy import ColumnElement, and_

logger = logging.getLogger(__name__)

# range of a signed 64-bit integer column (BIGINT on Postgres, INTEGER on SQLite)
DB_INT_MIN = -(2 ** 63)
DB_INT_MAX = 2 ** 63 - 1

_TRUE_FLAGS = {"true", "y", "yes", "1"}
_FALSE_FLAGS = {"false", "n", "no", "0"}


def normalize_search(value: Any) -> str | None:
    """Trimmed, lower-cased search text, or None when blank."""
    if value is None:
        return None
    term = str(value).strip().lower()
    return term or None


def contains(column, term: str) -> ColumnElement[bool]:
    """Case-insensitive substring match; `%` and `_` in `term` match literally."""
    return column.icontains(term, autoescape=True)


def _naive_local(value: datetime) -> datetime:
    # stored timestamps are naive local time
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def parse_datetime(value: Any) -> datetime | None:
    """
    Parse ISO-8601 date or date-time text. Returns None for anything that does
    not parse; a trailing "Z" is accepted.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return _naive_local(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min)

    text = str(value).strip()
    if not text:
        return None
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        logger.debug("filters.invalid_date", extra={"value": text[:64]})
        return None
    return _naive_local(parsed)


def date_range(column, start: Any, end: Any) -> ColumnElement[bool] | None:
    """
    Inclusive range on `column`, applied only when both bounds parse. A bare
    date as the upper bound covers that whole day.
    """
    start_at = parse_datetime(start)
    end_at = parse_datetime(end)
    if start_at is None or end_at is None:
        return None
    if isinstance(end, str) and "T" not in end and " " not in end.strip():
        end_at = datetime.combine(end_at.date(), time.max)
    return and_(column >= start_at, column <= end_at)


def coerce_active_flag(value: Any) -> str | None:
    """
    Map boolean-ish input (True/False, "true"/"false", "Y"/"N", ...) to the
    stored "Y"/"N" encoding. Unrecognized or blank input gives None.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "Y" if value else "N"
    text = str(value).strip().lower()
    if text in _TRUE_FLAGS:
        return "Y"
    if text in _FALSE_FLAGS:
        return "N"
    return None


def coerce_int(value: Any) -> int | None:
    """
    Integer from int or numeric text. None for blank or unparsable input and
    for values a database integer column cannot hold.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = value
    else:
        try:
            number = int(str(value).strip())
        except ValueError:
            return None
    if not DB_INT_MIN <= number <= DB_INT_MAX:
        return None
    return number
