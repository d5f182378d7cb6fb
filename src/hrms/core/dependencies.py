"""
FastAPI dependencies: the per-request session and the entity services built on it.
"""
from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from hrms.database.session import Database
from hrms.repositories import (
    AppraisalRepository,
    BranchRepository,
    EmploymentContractRepository,
    ModuleRepository,
    StatutoryRateRepository,
)
from hrms.services import (
    AppraisalService,
    BranchService,
    EmploymentContractService,
    ModuleService,
    StatutoryRateService,
)


def get_database(request: Request) -> Database:
    # created by the application lifespan
    return request.app.state.database


async def get_db_session(database: Database = Depends(get_database)) -> AsyncGenerator[AsyncSession, None]:
    async for session in database.session():
        yield session


def get_branch_service(db: AsyncSession = Depends(get_db_session)) -> BranchService:
    return BranchService(BranchRepository(db))


def get_module_service(db: AsyncSession = Depends(get_db_session)) -> ModuleService:
    return ModuleService(ModuleRepository(db))


def get_employment_contract_service(db: AsyncSession = Depends(get_db_session)) -> EmploymentContractService:
    return EmploymentContractService(EmploymentContractRepository(db))


def get_appraisal_service(db: AsyncSession = Depends(get_db_session)) -> AppraisalService:
    return AppraisalService(AppraisalRepository(db))


def get_statutory_rate_service(db: AsyncSession = Depends(get_db_session)) -> StatutoryRateService:
    return StatutoryRateService(StatutoryRateRepository(db))
