"""Response envelope, page result and shared field sets."""
from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

# "Y"/"N", or a boolean the repository maps to "Y"/"N"
ActiveFlag = bool | str | None


class Envelope(BaseModel, Generic[T]):
    """Success body shared by every endpoint."""

    message: str | None = None
    data: T | None = None


class PageResult(BaseModel, Generic[T]):
    """One page of a list endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    data: list[T]
    current_page: int = Field(alias="currentPage")
    size: int
    total_pages: int = Field(alias="totalPages")
    total_count: int = Field(alias="totalCount")


class WritePayload(BaseModel):
    """Base for request bodies: unknown keys are dropped, audit ids accepted."""

    model_config = ConfigDict(extra="ignore")

    is_active: ActiveFlag = None
    createdby: int | None = None
    updatedby: int | None = None
    log_inst: int | None = None


class AuditRead(BaseModel):
    """Audit columns carried by every record."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    is_active: str
    createdby: int | None = None
    createdate: datetime | None = None
    updatedby: int | None = None
    updatedate: datetime | None = None
    log_inst: int | None = None
