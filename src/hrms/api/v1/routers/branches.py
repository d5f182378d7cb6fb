"""
Branch endpoints: /api/v1/branches
"""
from fastapi import APIRouter, Depends, Query, status

from hrms.core.dependencies import get_branch_service
from hrms.exceptions.base import NotFoundError
from hrms.schemas.branch import BranchCreate, BranchRead, BranchUpdate
from hrms.schemas.common import Envelope, PageResult
from hrms.services import BranchService
from ..responses import success

router = APIRouter(prefix="/branches", tags=["branches"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Envelope[BranchRead])
async def create_branch(
    payload: BranchCreate,
    service: BranchService = Depends(get_branch_service),
):
    branch = await service.create(payload.model_dump(exclude_unset=True))
    return success("branch created successfully", branch)


@router.get("/{branch_id}", response_model=Envelope[BranchRead])
async def get_branch(branch_id: int, service: BranchService = Depends(get_branch_service)):
    branch = await service.find_by_id(branch_id)
    if branch is None:
        raise NotFoundError("branch not found")
    return success(None, branch)


@router.put("/{branch_id}", response_model=Envelope[BranchRead])
async def update_branch(
    branch_id: int,
    payload: BranchUpdate,
    service: BranchService = Depends(get_branch_service),
):
    branch = await service.update(branch_id, payload.model_dump(exclude_unset=True))
    return success("branch updated successfully", branch)


@router.delete("/{branch_id}")
async def delete_branch(branch_id: int, service: BranchService = Depends(get_branch_service)):
    await service.delete(branch_id)
    return success("branch deleted successfully")


@router.get("", response_model=Envelope[PageResult[BranchRead]])
async def list_branches(
    page: str | None = None,
    size: str | None = None,
    search: str | None = None,
    start_date: str | None = Query(None, alias="startDate"),
    end_date: str | None = Query(None, alias="endDate"),
    is_active: str | None = None,
    service: BranchService = Depends(get_branch_service),
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
