"""Pydantic request / response models for the HTTP API."""
from .common import Envelope, PageResult
from .branch import BranchCreate, BranchRead, BranchUpdate
from .module import ModuleCreate, ModuleRead, ModuleUpdate
from .employment_contract import EmploymentContractCreate, EmploymentContractRead, EmploymentContractUpdate
from .appraisal import AppraisalCreate, AppraisalRead, AppraisalUpdate
from .statutory_rate import StatutoryRateCreate, StatutoryRateRead, StatutoryRateUpdate

__all__ = [
    "Envelope",
    "PageResult",
    "BranchCreate",
    "BranchRead",
    "BranchUpdate",
    "ModuleCreate",
    "ModuleRead",
    "ModuleUpdate",
    "EmploymentContractCreate",
    "EmploymentContractRead",
    "EmploymentContractUpdate",
    "AppraisalCreate",
    "AppraisalRead",
    "AppraisalUpdate",
    "StatutoryRateCreate",
    "StatutoryRateRead",
    "StatutoryRateUpdate",
]
