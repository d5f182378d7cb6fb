from .base_repository import BaseRepository
from .pagination import Page
from .reference_repositories import CandidateRepository, EmployeeRepository
from .branch_repository import BranchRepository
from .module_repository import ModuleRepository
from .employment_contract_repository import EmploymentContractRepository
from .appraisal_repository import AppraisalRepository
from .statutory_rate_repository import StatutoryRateRepository

__all__ = [
    "BaseRepository",
    "Page",
    "CandidateRepository",
    "EmployeeRepository",
    "BranchRepository",
    "ModuleRepository",
    "EmploymentContractRepository",
    "AppraisalRepository",
    "StatutoryRateRepository",
]
