from __future__ import annotations

from typing import Any

from src.application.catalog import CatalogEntity
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.pagination import Page, offset_for, paging_error
from src.application.result import Result
from src.application.services.boundary import result_boundary


@result_boundary("find_all")
async def execute(
    uow: UnitOfWork,
    *,
    entity: CatalogEntity,
    page: int,
    page_size: int,
    max_page_size: int = 100,
) -> Result[Page[Any]]:
    problem = paging_error(page, page_size, max_page_size)
    if problem:
        return Result.invalid(problem)
    gateway = uow.gateway(entity.kind)
    total = await gateway.count_by(deleted=False)
    items = await gateway.find_many_by(
        offset=offset_for(page, page_size), limit=page_size, deleted=False
    )
    return Result.success(
        f"Active {entity.plural} found",
        Page(items=items, current_page=page, page_size=page_size, total_count=total),
    )
