from __future__ import annotations

from typing import Any
from uuid import UUID

from src.application.catalog import CatalogEntity
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.result import Result
from src.application.services.boundary import result_boundary


@result_boundary("find_one")
async def execute(uow: UnitOfWork, *, entity: CatalogEntity, record_id: UUID) -> Result[Any]:
    record = await uow.gateway(entity.kind).get(record_id)
    if record is None:
        return Result.not_found(f"{entity.title} not found")
    return Result.success(f"{entity.title} found", record)
