"""
Statutory rate endpoints: /api/v1/statutory-rates
"""
from fastapi import APIRouter, Depends, Query, status

from hrms.core.dependencies import get_statutory_rate_service
from hrms.exceptions.base import NotFoundError
from hrms.schemas.common import Envelope, PageResult
from hrms.schemas.statutory_rate import StatutoryRateCreate, StatutoryRateRead, StatutoryRateUpdate
from hrms.services import StatutoryRateService
from ..responses import success

router = APIRouter(prefix="/statutory-rates", tags=["statutory rates"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Envelope[StatutoryRateRead])
async def create_statutory_rate(
    payload: StatutoryRateCreate,
    service: StatutoryRateService = Depends(get_statutory_rate_service),
):
    rate = await service.create(payload.model_dump(exclude_unset=True))
    return success("statutory rate created successfully", rate)


@router.get("/{rate_id}", response_model=Envelope[StatutoryRateRead])
async def get_statutory_rate(rate_id: int, service: StatutoryRateService = Depends(get_statutory_rate_service)):
    rate = await service.find_by_id(rate_id)
    if rate is None:
        raise NotFoundError("statutory rate not found")
    return success(None, rate)


@router.put("/{rate_id}", response_model=Envelope[StatutoryRateRead])
async def update_statutory_rate(
    rate_id: int,
    payload: StatutoryRateUpdate,
    service: StatutoryRateService = Depends(get_statutory_rate_service),
):
    rate = await service.update(rate_id, payload.model_dump(exclude_unset=True))
    return success("statutory rate updated successfully", rate)


@router.delete("/{rate_id}")
async def delete_statutory_rate(rate_id: int, service: StatutoryRateService = Depends(get_statutory_rate_service)):
    await service.delete(rate_id)
    return success("statutory rate deleted successfully")


@router.get("", response_model=Envelope[PageResult[StatutoryRateRead]])
async def list_statutory_rates(
    page: str | None = None,
    size: str | None = None,
    search: str | None = None,
    start_date: str | None = Query(None, alias="startDate"),
    end_date: str | None = Query(None, alias="endDate"),
    is_active: str | None = None,
    service: StatutoryRateService = Depends(get_statutory_rate_service),
):
    result = await service.list_all(
        page=page,
        size=size,
        search=search,
        start_date=start_date,
        end_date=end_date,
        is_active=is_active,
    )
    return success(None, result.to_dict())
