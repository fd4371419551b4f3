from __future__ import annotations

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.pagination import Page, offset_for, paging_error
from src.application.result import Result
from src.application.services.boundary import result_boundary
from src.domain.models.user import UserWithRole


@result_boundary("find_all_users")
async def execute(
    uow: UnitOfWork, *, page: int, page_size: int, max_page_size: int = 100
) -> Result[Page[UserWithRole]]:
    problem = paging_error(page, page_size, max_page_size)
    if problem:
        return Result.invalid(problem)
    total = await uow.users.count_by(deleted=False)
    items = await uow.users.list_with_roles(offset=offset_for(page, page_size), limit=page_size)
    return Result.success(
        "Active users found",
        Page(items=items, current_page=page, page_size=page_size, total_count=total),
    )
