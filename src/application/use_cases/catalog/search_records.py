from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from src.application.catalog import CatalogEntity
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.result import Result
from src.application.services.boundary import result_boundary


async def _collect(
    entity: CatalogEntity, term: str, finder: Callable[[str], Awaitable[list[Any]]]
) -> Result[list[Any]]:
    if not term or not term.strip():
        return Result.invalid("A search term is required")
    items = await finder(term)
    if not items:
        return Result.warning(f"No {entity.plural} matched '{term.strip()}'", [])
    return Result.success(f"{entity.title} matches found", items)


@result_boundary("find_by_name")
async def execute(uow: UnitOfWork, *, entity: CatalogEntity, fragment: str) -> Result[list[Any]]:
    return await _collect(entity, fragment, uow.gateway(entity.kind).search_by_name)


@result_boundary("find_by_personality")
async def by_personality(
    uow: UnitOfWork, *, entity: CatalogEntity, fragment: str
) -> Result[list[Any]]:
    return await _collect(entity, fragment, uow.characteristics.search_by_personality)


@result_boundary("find_by_keyword")
async def by_keyword(uow: UnitOfWork, *, entity: CatalogEntity, keyword: str) -> Result[list[Any]]:
    return await _collect(entity, keyword, uow.characteristics.search_by_keyword)
