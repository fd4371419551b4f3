from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import AuthError
from src.domain.models.principal import Principal
from src.domain.value_objects.role import RoleName
from src.infrastructure.db.orm.role import RoleORM
from src.infrastructure.db.orm.user import UserORM


@dataclass(slots=True)
class AuthContext:
    principal: Principal
    claims: dict[str, Any]

    @property
    def user_id(self) -> UUID:
        return self.principal.id

    @property
    def role(self) -> RoleName:
        return self.principal.role


async def fetch_principal(session: AsyncSession, user_id: UUID) -> Principal:
    """Build the caller identity from the persisted user and role rows.

    The role string is checked against the closed role set here, once, so
    downstream permission checks only ever see a valid ``RoleName``.
    """
    stmt = (
        select(UserORM.id, UserORM.name, UserORM.deleted, RoleORM.name)
        .join(RoleORM, UserORM.role_id == RoleORM.id)
        .where(UserORM.id == user_id)
    )
    row = (await session.execute(stmt)).first()
    if row is None:
        raise AuthError("User not found")
    uid, name, deleted, role_name = row
    if deleted:
        raise AuthError("User account is disabled")
    try:
        role = RoleName.parse(role_name)
    except ValueError as exc:
        raise AuthError(f"Unknown role '{role_name}'") from exc
    return Principal(id=uid, role=role, display_name=name)
