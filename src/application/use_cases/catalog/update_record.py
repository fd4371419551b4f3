from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from src.application.catalog import CatalogEntity
from src.application.errors import ConflictError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.result import FailureReason, Result
from src.application.services.boundary import result_boundary
from src.application.services.changes import reject_cleared
from src.application.services.existence import exists
from src.application.use_cases.catalog.create_record import check_name_free, check_references
from src.domain.models.principal import Principal
from src.domain.policies.permissions import Action, Target, resolve
from src.domain.value_objects.entity_kind import KeyType


@result_boundary("update")
async def execute(
    uow: UnitOfWork,
    *,
    entity: CatalogEntity,
    caller: Principal,
    record_id: UUID,
    changes: Mapping[str, Any],
) -> Result[Any]:
    """Apply only the fields present in ``changes``; absent fields stay untouched."""
    decision = resolve(caller, Target(record_id=record_id), Action.UPDATE)
    if not decision:
        return Result.unauthorized(decision.reason or "Not allowed")
    if not changes:
        return Result.invalid(
            "At least one field is required to update", FailureReason.NOTHING_TO_UPDATE
        )
    cleared = reject_cleared(changes, entity.required_fields)
    if cleared is not None:
        return cleared
    if not await exists(uow, entity.kind, KeyType.ID, record_id, deleted=False):
        return Result.not_found(f"{entity.title} not found")
    if entity.validate is not None:
        problem = entity.validate(changes)
        if problem:
            return Result.invalid(problem)

    failure = await check_name_free(uow, entity, changes, exclude_id=record_id)
    if failure is None:
        failure = await check_references(uow, entity, changes)
    if failure is not None:
        return failure

    try:
        updated = await uow.gateway(entity.kind).update_partial(record_id, dict(changes))
    except ConflictError:
        await uow.rollback()
        return Result.duplicate(f"{entity.title} conflicts with an existing record")
    if updated is None:
        await uow.rollback()
        return Result.not_found(f"{entity.title} not found")
    await uow.commit()
    return Result.success(f"{entity.title} updated", updated)
