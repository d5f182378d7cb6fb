"""
Module repository: the catalogue of HRMS modules used for permissions and menus.
"""
from typing import Any

from sqlalchemy import ColumnElement
from sqlalchemy.ext.asyncio import AsyncSession

from hrms.models.module import Module
from .base_repository import BaseRepository
from .filters import coerce_active_flag, contains


class ModuleRepository(BaseRepository[Module]):
    label = "module"
    ordering = (("module_name", "asc"), ("updatedate", "desc"), ("createdate", "desc"))
    # module lists have no date range
    date_field = None

    def __init__(self, db: AsyncSession):
        super().__init__(Module, db)

    def search_condition(self, term: str) -> ColumnElement[bool]:
        return contains(Module.module_name, term)

    def extra_filters(self, is_active: Any = None, **_: Any) -> list[ColumnElement[bool]]:
        flag = coerce_active_flag(is_active)
        return [Module.is_active == flag] if flag else []
