from __future__ import annotations

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.pagination import Page, offset_for, paging_error
from src.application.result import Result
from src.application.services.boundary import result_boundary
from src.domain.models.client import Client


@result_boundary("find_all_clients")
async def execute(
    uow: UnitOfWork, *, page: int, page_size: int, max_page_size: int = 100
) -> Result[Page[Client]]:
    problem = paging_error(page, page_size, max_page_size)
    if problem:
        return Result.invalid(problem)
    total = await uow.clients.count_by(deleted=False)
    items = await uow.clients.find_many_by(
        offset=offset_for(page, page_size), limit=page_size, deleted=False
    )
    return Result.success(
        "Active clients found",
        Page(items=items, current_page=page, page_size=page_size, total_count=total),
    )
