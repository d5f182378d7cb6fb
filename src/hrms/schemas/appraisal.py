from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .common import AuditRead, WritePayload


class AppraisalWrite(WritePayload):
    employee_id: int | str | None = None
    review_period_start: datetime | None = None
    review_period_end: datetime | None = None
    appraisal_cycle: str | None = None
    rating: float | None = Field(None, ge=0)
    reviewer_comments: str | None = None
    status: str | None = None


AppraisalCreate = AppraisalWrite
AppraisalUpdate = AppraisalWrite


class EmployeeSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    full_name: str
    employee_code: str | None = None


class AppraisalRead(AuditRead):
    employee_id: int | None = None
    review_period_start: datetime | None = None
    review_period_end: datetime | None = None
    appraisal_cycle: str = ""
    rating: float | None = None
    reviewer_comments: str = ""
    status: str = "Pending"
    appraisal_employee: EmployeeSummary | None = None
