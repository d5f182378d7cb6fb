"""
Employment contract payloads.

`candidate_id` is accepted as a number or numeric text; anything that does not
name an existing candidate is rejected by the repository with a 404.
"""
from datetime import datetime

from pydantic import BaseModel, ConfigDict

from .common import AuditRead, WritePayload


class EmploymentContractWrite(WritePayload):
    candidate_id: int | str | None = None
    contract_start_date: datetime | None = None
    contract_end_date: datetime | None = None
    contract_type: str | None = None
    document_path: str | None = None
    description: str | None = None


EmploymentContractCreate = EmploymentContractWrite
EmploymentContractUpdate = EmploymentContractWrite


class CandidateSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    full_name: str


class EmploymentContractRead(AuditRead):
    candidate_id: int | None = None
    contract_start_date: datetime | None = None
    contract_end_date: datetime | None = None
    contract_type: str = ""
    document_path: str = ""
    description: str = ""
    contracted_candidate: CandidateSummary | None = None
