from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.result import Result
from src.application.services import lifecycle
from src.application.services.boundary import result_boundary
from src.domain.models.principal import Principal
from src.domain.value_objects.entity_kind import EntityKind


async def remove(
    uow: UnitOfWork, *, caller: Principal, record_id: UUID
) -> Result[lifecycle.ToggleOutcome]:
    return await lifecycle.toggle_delete(
        uow, kind=EntityKind.CLIENT, record_id=record_id, deleted=True, caller=caller
    )


@result_boundary("remove_my_client")
async def remove_mine(uow: UnitOfWork, *, caller: Principal) -> Result[lifecycle.ToggleOutcome]:
    client = await uow.clients.get_by_user(caller.id)
    if client is None:
        return Result.not_found("You don't have a client profile")
    return await remove(uow, caller=caller, record_id=client.id)


async def restore(
    uow: UnitOfWork, *, caller: Principal, record_id: UUID
) -> Result[lifecycle.ToggleOutcome]:
    return await lifecycle.toggle_delete(
        uow, kind=EntityKind.CLIENT, record_id=record_id, deleted=False, caller=caller
    )
