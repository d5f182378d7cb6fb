"""
Appraisal endpoints: /api/v1/appraisals
"""
from fastapi import APIRouter, Depends, Query, status

from hrms.core.dependencies import get_appraisal_service
from hrms.exceptions.base import NotFoundError
from hrms.schemas.appraisal import AppraisalCreate, AppraisalRead, AppraisalUpdate
from hrms.schemas.common import Envelope, PageResult
from hrms.services import AppraisalService
from ..responses import success

router = APIRouter(prefix="/appraisals", tags=["appraisals"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Envelope[AppraisalRead])
async def create_appraisal(
    payload: AppraisalCreate,
    service: AppraisalService = Depends(get_appraisal_service),
):
    appraisal = await service.create(payload.model_dump(exclude_unset=True))
    return success("appraisal created successfully", appraisal)


@router.get("/{appraisal_id}", response_model=Envelope[AppraisalRead])
async def get_appraisal(appraisal_id: int, service: AppraisalService = Depends(get_appraisal_service)):
    appraisal = await service.find_by_id(appraisal_id)
    if appraisal is None:
        raise NotFoundError("appraisal not found")
    return success(None, appraisal)


@router.put("/{appraisal_id}", response_model=Envelope[AppraisalRead])
async def update_appraisal(
    appraisal_id: int,
    payload: AppraisalUpdate,
    service: AppraisalService = Depends(get_appraisal_service),
):
    appraisal = await service.update(appraisal_id, payload.model_dump(exclude_unset=True))
    return success("appraisal updated successfully", appraisal)


@router.delete("/{appraisal_id}")
async def delete_appraisal(appraisal_id: int, service: AppraisalService = Depends(get_appraisal_service)):
    await service.delete(appraisal_id)
    return success("appraisal deleted successfully")


@router.get("", response_model=Envelope[PageResult[AppraisalRead]])
async def list_appraisals(
    page: str | None = None,
    size: str | None = None,
    search: str | None = None,
    start_date: str | None = Query(None, alias="startDate"),
    end_date: str | None = Query(None, alias="endDate"),
    employee_id: str | None = None,
    service: AppraisalService = Depends(get_appraisal_service),
):
    result = await service.list_all(
        page=page,
        size=size,
        search=search,
        start_date=start_date,
        end_date=end_date,
        employee_id=employee_id,
    )
    return success(None, result.to_dict())
