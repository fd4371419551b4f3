from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from src.application.catalog import CatalogEntity
from src.application.errors import ConflictError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.result import FailureReason, Result
from src.application.services.boundary import result_boundary
from src.application.services.existence import missing_references
from src.domain.models.principal import Principal
from src.domain.policies.permissions import Action, Target, resolve


async def check_name_free(
    uow: UnitOfWork, entity: CatalogEntity, values: Mapping[str, Any], *, exclude_id=None
) -> Result[Any] | None:
    if not entity.unique_name or entity.name_field is None:
        return None
    name = values.get(entity.name_field)
    if not name:
        return None
    clash = await uow.gateway(entity.kind).find_by_name(str(name), exclude_id=exclude_id)
    if clash is not None:
        return Result.duplicate(f"{entity.title} '{name}' already exists")
    return None


async def check_references(
    uow: UnitOfWork, entity: CatalogEntity, values: Mapping[str, Any]
) -> Result[Any] | None:
    refs = {
        field_name: (kind, values.get(field_name))
        for field_name, kind in entity.references.items()
        if field_name in values
    }
    missing = await missing_references(uow, refs)
    if missing:
        return Result.invalid(
            f"Referenced record not found or inactive: {', '.join(missing)}",
            FailureReason.INVALID_REFERENCE,
        )
    return None


@result_boundary("create")
async def execute(
    uow: UnitOfWork,
    *,
    entity: CatalogEntity,
    caller: Principal,
    values: Mapping[str, Any],
) -> Result[Any]:
    decision = resolve(caller, Target(), Action.CREATE)
    if not decision:
        return Result.unauthorized(decision.reason or "Not allowed")
    if entity.validate is not None:
        problem = entity.validate(values)
        if problem:
            return Result.invalid(problem)

    failure = await check_name_free(uow, entity, values)
    if failure is None:
        failure = await check_references(uow, entity, values)
    if failure is not None:
        return failure

    record = entity.factory(**values)
    try:
        created = await uow.gateway(entity.kind).insert(record)
        await uow.commit()
    except ConflictError:
        await uow.rollback()
        return Result.duplicate(f"{entity.title} already exists")
    return Result.success(f"{entity.title} created successfully", created)
