"""
Employment contract repository.

Every contract returned carries `contracted_candidate` ({id, full_name});
writes check that `candidate_id` names an existing candidate first.
"""
from datetime import datetime
from typing import Any

from sqlalchemy import ColumnElement, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from hrms.models.candidate import Candidate
from hrms.models.employment_contract import EmploymentContract
from hrms.validators.existence_validators import ensure_exists
from .base_repository import BaseRepository
from .filters import coerce_int, contains, parse_datetime
from .reference_repositories import CandidateRepository

_TEXT_FIELDS = ("contract_type", "document_path", "description")
_DATE_FIELDS = ("contract_start_date", "contract_end_date")


class EmploymentContractRepository(BaseRepository[EmploymentContract]):
    label = "employment contract"

    def __init__(self, db: AsyncSession, candidates: CandidateRepository | None = None):
        super().__init__(EmploymentContract, db)
        self.candidates = candidates or CandidateRepository(db)

    def load_options(self):
        return [
            selectinload(EmploymentContract.contracted_candidate).load_only(Candidate.id, Candidate.full_name),
        ]

    def _normalize(self, values: dict[str, Any]) -> dict[str, Any]:
        if "candidate_id" in values:
            values["candidate_id"] = coerce_int(values["candidate_id"]) or None
        for name in _DATE_FIELDS:
            if name in values:
                values[name] = parse_datetime(values[name]) or datetime.now()
        for name in _TEXT_FIELDS:
            if name in values:
                values[name] = values[name] or ""
        return values

    def normalize_create(self, values: dict[str, Any]) -> dict[str, Any]:
        for name in _DATE_FIELDS:
            values.setdefault(name, None)
        for name in _TEXT_FIELDS:
            values.setdefault(name, "")
        values.setdefault("candidate_id", None)
        return self._normalize(values)

    def normalize_update(self, values: dict[str, Any]) -> dict[str, Any]:
        return self._normalize(values)

    async def validate_references(self, values) -> None:
        if "candidate_id" in values:
            await ensure_exists(self.candidates, values["candidate_id"], "Candidate")

    def search_condition(self, term: str) -> ColumnElement[bool]:
        return or_(
            EmploymentContract.contracted_candidate.has(contains(Candidate.full_name, term)),
            contains(EmploymentContract.contract_type, term),
        )

    def extra_filters(self, candidate_id: Any = None, **_: Any) -> list[ColumnElement[bool]]:
        key = coerce_int(candidate_id)
        return [EmploymentContract.candidate_id == key] if key else []
