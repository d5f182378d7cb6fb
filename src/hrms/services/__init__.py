from .base_service import BaseService
from .entity_services import (
    AppraisalService,
    BranchService,
    EmploymentContractService,
    ModuleService,
    StatutoryRateService,
)

__all__ = [
    "BaseService",
    "BranchService",
    "ModuleService",
    "EmploymentContractService",
    "AppraisalService",
    "StatutoryRateService",
]
