from pydantic import Field

from .common import AuditRead, WritePayload


class ModuleCreate(WritePayload):
    module_name: str = Field(..., min_length=1, max_length=150)
    description: str | None = None


class ModuleUpdate(WritePayload):
    module_name: str | None = Field(None, min_length=1, max_length=150)
    description: str | None = None


class ModuleRead(AuditRead):
    module_name: str
    description: str | None = None
