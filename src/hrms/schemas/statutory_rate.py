from datetime import datetime

from pydantic import Field

from .common import AuditRead, WritePayload


class StatutoryRateCreate(WritePayload):
    statutory_type: str = Field(..., min_length=1, max_length=100)
    rate: float | None = None
    lower_limit: float | None = None
    upper_limit: float | None = None
    effective_from: datetime | None = None
    effective_to: datetime | None = None
    description: str | None = None


class StatutoryRateUpdate(WritePayload):
    statutory_type: str | None = Field(None, min_length=1, max_length=100)
    rate: float | None = None
    lower_limit: float | None = None
    upper_limit: float | None = None
    effective_from: datetime | None = None
    effective_to: datetime | None = None
    description: str | None = None


class StatutoryRateRead(AuditRead):
    statutory_type: str
    rate: float
    lower_limit: float
    upper_limit: float
    effective_from: datetime | None = None
    effective_to: datetime | None = None
    description: str | None = None
