"""
Appraisal repository.

Appraisals always carry `appraisal_employee` ({id, full_name, employee_code});
writes check that `employee_id` names an existing employee first.
"""
from decimal import Decimal, InvalidOperation
from typing import Any

from sqlalchemy import ColumnElement, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hrms.models.appraisal import Appraisal
from hrms.models.employee import Employee
from hrms.validators.existence_validators import ensure_exists
from .base_repository import BaseRepository
from .filters import coerce_int, contains, parse_datetime
from .reference_repositories import EmployeeRepository

DEFAULT_STATUS = "Pending"


def _to_rating(value: Any) -> Decimal | None:
    if value is None or value == "":
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return None


class AppraisalRepository(BaseRepository[Appraisal]):
    label = "appraisal"

    def __init__(self, db: AsyncSession, employees: EmployeeRepository | None = None):
        super().__init__(Appraisal, db)
        self.employees = employees or EmployeeRepository(db)

    def load_options(self):
        return [
            selectinload(Appraisal.appraisal_employee).load_only(
                Employee.id, Employee.full_name, Employee.employee_code
            ),
        ]

    def _normalize(self, values: dict[str, Any]) -> dict[str, Any]:
        if "employee_id" in values:
            values["employee_id"] = coerce_int(values["employee_id"])
        for name in ("review_period_start", "review_period_end"):
            if name in values:
                values[name] = parse_datetime(values[name])
        for name in ("appraisal_cycle", "reviewer_comments"):
            if name in values:
                values[name] = values[name] or ""
        if "status" in values:
            values["status"] = values["status"] or DEFAULT_STATUS
        if "rating" in values:
            values["rating"] = _to_rating(values["rating"])
        return values

    def normalize_create(self, values: dict[str, Any]) -> dict[str, Any]:
        values.setdefault("appraisal_cycle", "")
        values.setdefault("reviewer_comments", "")
        values.setdefault("status", DEFAULT_STATUS)
        values.setdefault("employee_id", None)
        return self._normalize(values)

    def normalize_update(self, values: dict[str, Any]) -> dict[str, Any]:
        return self._normalize(values)

    async def validate_references(self, values) -> None:
        if "employee_id" in values:
            await ensure_exists(self.employees, values["employee_id"], "Employee")

    def search_condition(self, term: str) -> ColumnElement[bool]:
        return or_(
            Appraisal.appraisal_employee.has(contains(Employee.full_name, term)),
            contains(Appraisal.appraisal_cycle, term),
        )

    def extra_filters(self, employee_id: Any = None, **_: Any) -> list[ColumnElement[bool]]:
        key = coerce_int(employee_id)
        return [Appraisal.employee_id == key] if key else []
