from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from src.application.errors import ConflictError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.result import FailureReason, Result
from src.application.services.boundary import result_boundary
from src.application.services.changes import reject_cleared
from src.application.services.existence import missing_references
from src.domain.models.client import Client
from src.domain.models.principal import Principal
from src.domain.policies.permissions import Action, Target, resolve
from src.domain.value_objects.entity_kind import EntityKind

# Fields a client owner cannot change on their own profile
PRIVILEGED_FIELDS = frozenset({"economic_status_id"})
# Columns a client profile always has
REQUIRED_FIELDS = frozenset({"phone", "birth_date", "gender"})


async def _apply(
    uow: UnitOfWork, caller: Principal, client: Client, changes: Mapping[str, Any]
) -> Result[Client]:
    decision = resolve(
        caller,
        Target(owner_id=client.user_id, record_id=client.id),
        Action.UPDATE,
        changed_fields=changes.keys(),
        privileged_fields=PRIVILEGED_FIELDS,
    )
    if not decision:
        return Result.unauthorized(decision.reason or "Not allowed")
    if not changes:
        return Result.invalid(
            "At least one field is required to update", FailureReason.NOTHING_TO_UPDATE
        )
    cleared = reject_cleared(changes, REQUIRED_FIELDS)
    if cleared is not None:
        return cleared

    missing = await missing_references(
        uow, {"economic_status_id": (EntityKind.ECONOMIC_STATUS, changes.get("economic_status_id"))}
    )
    if missing:
        return Result.invalid("Economic status not found", FailureReason.INVALID_REFERENCE)

    try:
        updated = await uow.clients.update_partial(client.id, dict(changes))
    except ConflictError:
        await uow.rollback()
        return Result.conflict("Client update conflicts with stored data")
    if updated is None:
        await uow.rollback()
        return Result.not_found("Client not found")
    await uow.commit()
    return Result.success("Client updated", updated)


@result_boundary("update_client")
async def execute(
    uow: UnitOfWork, *, caller: Principal, record_id: UUID, changes: Mapping[str, Any]
) -> Result[Client]:
    client = await uow.clients.get(record_id)
    if client is None:
        return Result.not_found("Client not found")
    return await _apply(uow, caller, client, changes)


@result_boundary("update_my_client")
async def update_mine(
    uow: UnitOfWork, *, caller: Principal, changes: Mapping[str, Any]
) -> Result[Client]:
    client = await uow.clients.get_by_user(caller.id)
    if client is None:
        return Result.not_found("You don't have a client profile")
    return await _apply(uow, caller, client, changes)
