from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from src.application.errors import ConflictError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.result import FailureReason, Result
from src.application.services.boundary import result_boundary
from src.application.services.changes import reject_cleared
from src.domain.models.principal import Principal
from src.domain.models.user import UserWithRole
from src.domain.policies.permissions import Action, Target, is_privileged, resolve
from src.domain.value_objects.role import RoleName
from src.infrastructure.auth.password import PasswordHasher

REQUIRED_FIELDS = frozenset({"name", "email", "password", "role"})


@result_boundary("update_user")
async def execute(
    uow: UnitOfWork,
    *,
    caller: Principal,
    record_id: UUID,
    changes: Mapping[str, Any],
    password_hasher: PasswordHasher,
) -> Result[UserWithRole]:
    """Partial update of name, email, password and role.

    ``changes`` holds only the fields the caller sent. Changing the role is
    reserved to administrators, including on one's own account.
    """
    decision = resolve(
        caller,
        Target(owner_id=record_id, record_id=record_id),
        Action.UPDATE,
        changed_fields=changes.keys(),
        privileged_fields={"role"},
    )
    if not decision:
        return Result.unauthorized(decision.reason or "Not allowed")
    if "role" in changes and not is_privileged(caller.role, Action.ASSIGN_ROLE):
        return Result.unauthorized("Only an administrator can change a user's role")
    if not changes:
        return Result.invalid(
            "At least one field is required to update", FailureReason.NOTHING_TO_UPDATE
        )
    cleared = reject_cleared(changes, REQUIRED_FIELDS)
    if cleared is not None:
        return cleared

    current = await uow.users.get(record_id)
    if current is None:
        return Result.not_found("User not found")

    values: dict[str, Any] = {}
    if "name" in changes:
        values["name"] = str(changes["name"]).strip()
    if "email" in changes:
        email = str(changes["email"]).strip().lower()
        clash = await uow.users.get_by_email(email)
        if clash is not None and clash.id != record_id:
            return Result.duplicate("Email already registered")
        values["email"] = email
    if "password" in changes:
        values["hashed_password"] = password_hasher.hash(str(changes["password"]))
    if "role" in changes:
        try:
            role_name = RoleName.parse(str(changes["role"]))
        except ValueError:
            return Result.invalid(f"Unknown role '{changes['role']}'")
        role = await uow.roles.get_active_by_name(role_name.value)
        if role is None:
            return Result.invalid(
                f"Role '{role_name.value}' is not available", FailureReason.INVALID_REFERENCE
            )
        values["role_id"] = role.id
    if not values:
        return Result.invalid("No updatable fields were sent", FailureReason.NOTHING_TO_UPDATE)

    try:
        updated = await uow.users.update_partial(record_id, values)
    except ConflictError:
        await uow.rollback()
        return Result.duplicate("Email already registered")
    if updated is None:
        await uow.rollback()
        return Result.not_found("User not found")
    await uow.commit()
    return Result.success("User updated", await uow.users.get_with_role(record_id))
