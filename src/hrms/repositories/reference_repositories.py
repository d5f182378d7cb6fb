"""
Read-only repositories for tables owned by other HR modules.

Contracts reference candidates and appraisals reference employees; these
repositories exist so that those references can be checked with
`ensure_exists` (they satisfy `SupportsExists` through `BaseRepository.exists`).
"""
from sqlalchemy.ext.asyncio import AsyncSession

from hrms.models.candidate import Candidate
from hrms.models.employee import Employee
from .base_repository import BaseRepository


class CandidateRepository(BaseRepository[Candidate]):
    label = "Candidate"

    def __init__(self, db: AsyncSession):
        super().__init__(Candidate, db)


class EmployeeRepository(BaseRepository[Employee]):
    label = "Employee"

    def __init__(self, db: AsyncSession):
        super().__init__(Employee, db)
