"""
Module endpoints: /api/v1/modules

Module lists take no date range; startDate / endDate are not accepted.
"""
from fastapi import APIRouter, Depends, status

from hrms.core.dependencies import get_module_service
from hrms.exceptions.base import NotFoundError
from hrms.schemas.common import Envelope, PageResult
from hrms.schemas.module import ModuleCreate, ModuleRead, ModuleUpdate
from hrms.services import ModuleService
from ..responses import success

router = APIRouter(prefix="/modules", tags=["modules"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=Envelope[ModuleRead])
async def create_module(
    payload: ModuleCreate,
    service: ModuleService = Depends(get_module_service),
):
    module = await service.create(payload.model_dump(exclude_unset=True))
    return success("module created successfully", module)


@router.get("/{module_id}", response_model=Envelope[ModuleRead])
async def get_module(module_id: int, service: ModuleService = Depends(get_module_service)):
    module = await service.find_by_id(module_id)
    if module is None:
        raise NotFoundError("module not found")
    return success(None, module)


@router.put("/{module_id}", response_model=Envelope[ModuleRead])
async def update_module(
    module_id: int,
    payload: ModuleUpdate,
    service: ModuleService = Depends(get_module_service),
):
    module = await service.update(module_id, payload.model_dump(exclude_unset=True))
    return success("module updated successfully", module)


@router.delete("/{module_id}")
async def delete_module(module_id: int, service: ModuleService = Depends(get_module_service)):
    await service.delete(module_id)
    return success("module deleted successfully")


@router.get("", response_model=Envelope[PageResult[ModuleRead]])
async def list_modules(
    page: str | None = None,
    size: str | None = None,
    search: str | None = None,
    is_active: str | None = None,
    service: ModuleService = Depends(get_module_service),
):
    result = await service.list_all(page=page, size=size, search=search, is_active=is_active)
    return success(None, result.to_dict())
