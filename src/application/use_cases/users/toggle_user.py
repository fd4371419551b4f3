from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.result import Result
from src.application.services import lifecycle
from src.domain.models.principal import Principal
from src.domain.value_objects.entity_kind import EntityKind


async def remove(
    uow: UnitOfWork, *, caller: Principal, record_id: UUID
) -> Result[lifecycle.ToggleOutcome]:
    return await lifecycle.toggle_delete(
        uow, kind=EntityKind.USER, record_id=record_id, deleted=True, caller=caller
    )


async def restore(
    uow: UnitOfWork, *, caller: Principal, record_id: UUID
) -> Result[lifecycle.ToggleOutcome]:
    return await lifecycle.toggle_delete(
        uow, kind=EntityKind.USER, record_id=record_id, deleted=False, caller=caller
    )
