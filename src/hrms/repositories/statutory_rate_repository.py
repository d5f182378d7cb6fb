"""
Statutory rate repository: contribution / deduction rates and their wage bands.
"""
from decimal import Decimal, InvalidOperation
from typing import Any

from sqlalchemy import ColumnElement, or_
from sqlalchemy.ext.asyncio import AsyncSession

from hrms.models.statutory_rate import StatutoryRate
from .base_repository import BaseRepository
from .filters import coerce_active_flag, contains, parse_datetime

_NUMERIC_FIELDS = ("rate", "lower_limit", "upper_limit")
_DATE_FIELDS = ("effective_from", "effective_to")


def _to_decimal(value: Any) -> Decimal:
    if value is None or value == "":
        return Decimal(0)
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return Decimal(0)


class StatutoryRateRepository(BaseRepository[StatutoryRate]):
    label = "statutory rate"
    ordering = (("statutory_type", "asc"), ("updatedate", "desc"), ("createdate", "desc"))

    def __init__(self, db: AsyncSession):
        super().__init__(StatutoryRate, db)

    def _normalize(self, values: dict[str, Any]) -> dict[str, Any]:
        for name in _NUMERIC_FIELDS:
            if name in values:
                values[name] = _to_decimal(values[name])
        for name in _DATE_FIELDS:
            if name in values:
                values[name] = parse_datetime(values[name])
        return values

    def normalize_create(self, values: dict[str, Any]) -> dict[str, Any]:
        for name in _NUMERIC_FIELDS:
            values.setdefault(name, 0)
        return self._normalize(values)

    def normalize_update(self, values: dict[str, Any]) -> dict[str, Any]:
        return self._normalize(values)

    def search_condition(self, term: str) -> ColumnElement[bool]:
        return or_(
            contains(StatutoryRate.statutory_type, term),
            contains(StatutoryRate.description, term),
        )

    def extra_filters(self, is_active: Any = None, **_: Any) -> list[ColumnElement[bool]]:
        flag = coerce_active_flag(is_active)
        return [StatutoryRate.is_active == flag] if flag else []
