from pydantic import Field

from .common import AuditRead, WritePayload


class BranchCreate(WritePayload):
    branch_name: str = Field(..., min_length=1, max_length=150)
    branch_code: str | None = Field(None, max_length=50)
    location: str | None = None
    address: str | None = None
    contact_number: str | None = None
    email: str | None = None


class BranchUpdate(WritePayload):
    branch_name: str | None = Field(None, min_length=1, max_length=150)
    branch_code: str | None = Field(None, max_length=50)
    location: str | None = None
    address: str | None = None
    contact_number: str | None = None
    email: str | None = None


class BranchRead(AuditRead):
    branch_name: str
    branch_code: str | None = None
    location: str | None = None
    address: str | None = None
    contact_number: str | None = None
    email: str | None = None
