"""
Employment contract endpoints: /api/v1/employment-contracts
"""
from fastapi import APIRouter, Depends, Query, status

from hrms.core.dependencies import get_employment_contract_service
from hrms.exceptions.base import NotFoundError
from hrms.schemas.common import Envelope, PageResult
from hrms.schemas.employment_contract import (
    EmploymentContractCreate,
    EmploymentContractRead,
    EmploymentContractUpdate,
)
from hrms.services import EmploymentContractService
from ..responses import success

router = APIRouter(prefix="/employment-contracts", tags=["employment contracts"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Envelope[EmploymentContractRead])
async def create_employment_contract(
    payload: EmploymentContractCreate,
    service: EmploymentContractService = Depends(get_employment_contract_service),
):
    contract = await service.create(payload.model_dump(exclude_unset=True))
    return success("employment contract created successfully", contract)


@router.get("/{contract_id}", response_model=Envelope[EmploymentContractRead])
async def get_employment_contract(
    contract_id: int,
    service: EmploymentContractService = Depends(get_employment_contract_service),
):
    contract = await service.find_by_id(contract_id)
    if contract is None:
        raise NotFoundError("employment contract not found")
    return success(None, contract)


@router.put("/{contract_id}", response_model=Envelope[EmploymentContractRead])
async def update_employment_contract(
    contract_id: int,
    payload: EmploymentContractUpdate,
    service: EmploymentContractService = Depends(get_employment_contract_service),
):
    contract = await service.update(contract_id, payload.model_dump(exclude_unset=True))
    return success("employment contract updated successfully", contract)


@router.delete("/{contract_id}")
async def delete_employment_contract(
    contract_id: int,
    service: EmploymentContractService = Depends(get_employment_contract_service),
):
    await service.delete(contract_id)
    return success("employment contract deleted successfully")


@router.get("", response_model=Envelope[PageResult[EmploymentContractRead]])
async def list_employment_contracts(
    page: str | None = None,
    size: str | None = None,
    search: str | None = None,
    start_date: str | None = Query(None, alias="startDate"),
    end_date: str | None = Query(None, alias="endDate"),
    candidate_id: str | None = None,
    service: EmploymentContractService = Depends(get_employment_contract_service),
):
    result = await service.list_all(
        page=page,
        size=size,
        search=search,
        start_date=start_date,
        end_date=end_date,
        candidate_id=candidate_id,
    )
    return success(None, result.to_dict())
