"""
Branch repository: company offices and sites.
"""
from typing import Any

from sqlalchemy import ColumnElement, or_
from sqlalchemy.ext.asyncio import AsyncSession

from hrms.models.branch import Branch
from .base_repository import BaseRepository
from .filters import coerce_active_flag, contains


class BranchRepository(BaseRepository[Branch]):
    """
    Lists search `branch_name` or `branch_code`, filter on `is_active` and on
    the `createdate` range, and are ordered by name, then most recently
    updated, then most recently created.
    """

    label = "branch"
    plural_label = "branches"
    ordering = (("branch_name", "asc"), ("updatedate", "desc"), ("createdate", "desc"))

    def __init__(self, db: AsyncSession):
        super().__init__(Branch, db)

    def search_condition(self, term: str) -> ColumnElement[bool]:
        return or_(contains(Branch.branch_name, term), contains(Branch.branch_code, term))

    def extra_filters(self, is_active: Any = None, **_: Any) -> list[ColumnElement[bool]]:
        flag = coerce_active_flag(is_active)
        return [Branch.is_active == flag] if flag else []
