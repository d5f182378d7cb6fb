"""
Service layer between the routers and the repositories.

Services currently forward every call unchanged; they are the place where
business rules spanning more than one repository will live.
"""
from typing import Any, Generic, Mapping, TypeVar

from hrms.repositories.base_repository import BaseRepository
from hrms.repositories.pagination import Page

ModelType = TypeVar("ModelType")


class BaseService(Generic[ModelType]):
    def __init__(self, repository: BaseRepository[ModelType]):
        self.repository = repository

    async def create(self, data: Mapping[str, Any]) -> ModelType:
        return await self.repository.create(data)

    async def find_by_id(self, entity_id: int) -> ModelType | None:
        return await self.repository.get_by_id(entity_id)

    async def update(self, entity_id: int, data: Mapping[str, Any]) -> ModelType:
        return await self.repository.update(entity_id, data)

    async def delete(self, entity_id: int) -> None:
        await self.repository.delete(entity_id)

    async def list_all(
        self,
        page: Any = None,
        size: Any = None,
        search: Any = None,
        start_date: Any = None,
        end_date: Any = None,
        **filters: Any,
    ) -> Page[ModelType]:
        return await self.repository.list(
            page=page,
            size=size,
            search=search,
            start_date=start_date,
            end_date=end_date,
            **filters,
        )
