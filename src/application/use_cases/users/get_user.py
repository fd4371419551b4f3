from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.result import Result
from src.application.services.boundary import result_boundary
from src.domain.models.principal import Principal
from src.domain.models.user import UserWithRole
from src.domain.policies.permissions import Action, Target, resolve


@result_boundary("find_user")
async def find_one(uow: UnitOfWork, *, caller: Principal, record_id: UUID) -> Result[UserWithRole]:
    decision = resolve(
        caller, Target(owner_id=record_id, record_id=record_id), Action.READ_ACCOUNT
    )
    if not decision:
        return Result.unauthorized(decision.reason or "Not allowed")
    user = await uow.users.get_with_role(record_id)
    if user is None:
        return Result.not_found("User not found")
    return Result.success("User found", user)


@result_boundary("find_me")
async def me(uow: UnitOfWork, *, caller: Principal) -> Result[UserWithRole]:
    user = await uow.users.get_with_role(caller.id)
    if user is None:
        return Result.not_found("User not found")
    return Result.success("User found", user)
