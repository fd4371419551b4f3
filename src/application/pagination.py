from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def total_pages(total_count: int, page_size: int) -> int:
    return math.ceil(total_count / page_size) if total_count else 0


def offset_for(page: int, page_size: int) -> int:
    return (page - 1) * page_size


def paging_error(page: int, page_size: int, max_page_size: int) -> str | None:
    if page < 1:
        return "page must be greater than or equal to 1"
    if page_size < 1 or page_size > max_page_size:
        return f"page_size must be between 1 and {max_page_size}"
    return None


@dataclass(slots=True)
class Page(Generic[T]):
    items: list[T]
    current_page: int
    page_size: int
    total_count: int

    @property
    def total_pages(self) -> int:
        return total_pages(self.total_count, self.page_size)
