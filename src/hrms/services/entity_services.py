"""
One service per HRMS entity. Each is bound to its repository type so the
dependency layer can build it from a session.
"""
from hrms.models import Appraisal, Branch, EmploymentContract, Module, StatutoryRate
from hrms.repositories import (
    AppraisalRepository,
    BranchRepository,
    EmploymentContractRepository,
    ModuleRepository,
    StatutoryRateRepository,
)
from .base_service import BaseService


class BranchService(BaseService[Branch]):
    repository: BranchRepository


class ModuleService(BaseService[Module]):
    repository: ModuleRepository


class EmploymentContractService(BaseService[EmploymentContract]):
    repository: EmploymentContractRepository


class AppraisalService(BaseService[Appraisal]):
    repository: AppraisalRepository


class StatutoryRateService(BaseService[StatutoryRate]):
    repository: StatutoryRateRepository
