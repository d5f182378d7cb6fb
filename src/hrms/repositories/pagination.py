"""
Page request coercion and the page result returned by every list operation.
"""
import math
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from .filters import DB_INT_MAX, coerce_int

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10


def normalize_page(value: Any, default: int = DEFAULT_PAGE) -> int:
    """Page number >= 1; absent, zero, negative, unparsable or out-of-range values give `default`."""
    page = coerce_int(value)
    if page is None or page <= 0:
        return default
    return page


def normalize_size(value: Any, default: int = DEFAULT_PAGE_SIZE) -> int:
    """Page size >= 1; absent, zero, negative, unparsable or out-of-range values give `default`."""
    size = coerce_int(value)
    if not size or size < 0:
        return default
    return size


def compute_skip(page: int, size: int) -> int:
    # OFFSET is bound as a 64-bit integer
    return min(max((page - 1) * size, 0), DB_INT_MAX)


def total_pages(total_count: int, size: int) -> int:
    if total_count <= 0 or size <= 0:
        return 0
    return math.ceil(total_count / size)


@dataclass
class Page(Generic[T]):
    """
    One slice of a list query plus its pagination metadata.

    `total_count` and `data` come from two separate queries, so under
    concurrent writes they may disagree slightly.
    """
    data: list[T]
    current_page: int
    size: int
    total_count: int
    total_pages: int = field(init=False)

    def __post_init__(self) -> None:
        self.total_pages = total_pages(self.total_count, self.size)

    def to_dict(self) -> dict[str, Any]:
        """Wire shape: {data, currentPage, size, totalPages, totalCount}."""
        return {
            "data": self.data,
            "currentPage": self.current_page,
            "size": self.size,
            "totalPages": self.total_pages,
            "totalCount": self.total_count,
        }
