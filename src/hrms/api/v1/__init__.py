from fastapi import APIRouter

from .routers import (
    appraisals_router,
    branches_router,
    employment_contracts_router,
    modules_router,
    statutory_rates_router,
)

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(branches_router)
api_router.include_router(modules_router)
api_router.include_router(employment_contracts_router)
api_router.include_router(appraisals_router)
api_router.include_router(statutory_rates_router)

__all__ = ["api_router"]
