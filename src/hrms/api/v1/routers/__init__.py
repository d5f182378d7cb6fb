from .appraisals import router as appraisals_router
from .branches import router as branches_router
from .employment_contracts import router as employment_contracts_router
from .modules import router as modules_router
from .statutory_rates import router as statutory_rates_router

__all__ = [
    "appraisals_router",
    "branches_router",
    "employment_contracts_router",
    "modules_router",
    "statutory_rates_router",
]
