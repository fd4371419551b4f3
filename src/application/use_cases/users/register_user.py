from __future__ import annotations

import logging
from dataclasses import dataclass

from src.application.errors import ConflictError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.result import FailureReason, Result
from src.application.services.boundary import result_boundary
from src.domain.models.principal import Principal
from src.domain.models.user import User, UserWithRole
from src.domain.policies.permissions import Action, is_privileged
from src.domain.value_objects.role import RoleName
from src.infrastructure.auth.password import PasswordHasher

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RegisterUserInput:
    name: str
    email: str
    password: str
    role: str | None = None


@result_boundary("create_user")
async def execute(
    uow: UnitOfWork,
    *,
    payload: RegisterUserInput,
    password_hasher: PasswordHasher,
    requester: Principal | None = None,
    default_role: str = RoleName.USER.value,
) -> Result[UserWithRole]:
    """Create a user with the default role.

    Only an admin requester may pick another role; public registration and
    non-admin requesters asking for one are refused.
    """
    requested = payload.role or default_role
    try:
        role_name = RoleName.parse(requested)
    except ValueError:
        return Result.invalid(f"Unknown role '{requested}'")

    if role_name.value != default_role and (
        requester is None or not is_privileged(requester.role, Action.ASSIGN_ROLE)
    ):
        return Result.unauthorized("Only an administrator can assign a role")

    if await uow.users.get_by_email(payload.email) is not None:
        return Result.duplicate("Email already registered")

    role = await uow.roles.get_active_by_name(role_name.value)
    if role is None:
        return Result.invalid(
            f"Role '{role_name.value}' is not available", FailureReason.INVALID_REFERENCE
        )

    user = User.create(
        payload.name,
        payload.email,
        password_hasher.hash(payload.password),
        role_id=role.id,
    )
    try:
        created = await uow.users.insert(user)
        await uow.commit()
    except ConflictError:
        await uow.rollback()
        return Result.duplicate("Email already registered")
    logger.info("User %s registered with role %s", created.id, role.name)
    return Result.success("User created successfully", UserWithRole(user=created, role=role.name))
