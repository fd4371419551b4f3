from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.result import Result
from src.application.services.boundary import result_boundary
from src.application.services.existence import exists
from src.domain.models.client import Client
from src.domain.models.principal import Principal
from src.domain.policies.permissions import Action, Target, resolve
from src.domain.value_objects.entity_kind import EntityKind, KeyType


@result_boundary("find_client")
async def find_one(uow: UnitOfWork, *, caller: Principal, record_id: UUID) -> Result[Client]:
    client = await uow.clients.get(record_id)
    if client is None:
        return Result.not_found("Client not found")
    decision = resolve(caller, Target(owner_id=client.user_id, record_id=client.id), Action.READ)
    if not decision:
        return Result.unauthorized(decision.reason or "Not allowed")
    return Result.success("Client found", client)


@result_boundary("find_my_client")
async def find_mine(uow: UnitOfWork, *, caller: Principal) -> Result[Client]:
    client = await uow.clients.get_by_user(caller.id)
    if client is None:
        return Result.not_found("You don't have a client profile")
    return Result.success("Client found", client)


@result_boundary("client_exists")
async def exists_for_me(uow: UnitOfWork, *, caller: Principal) -> Result[bool]:
    found = await exists(uow, EntityKind.CLIENT, KeyType.OWNER, caller.id, deleted=False)
    message = "Client profile found" if found else "No client profile yet"
    return Result.success(message, found)
