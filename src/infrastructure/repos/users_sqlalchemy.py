from __future__ import annotations

from uuid import UUID

from sqlalchemy import select

from src.domain.models.user import User, UserWithRole
from src.domain.value_objects.entity_kind import EntityKind
from src.infrastructure.db.orm.role import RoleORM
from src.infrastructure.db.orm.user import UserORM
from src.infrastructure.repos.base_sqlalchemy import SQLAlchemyGateway


class UsersSQLAlchemyRepository(SQLAlchemyGateway[User]):
    kind = EntityKind.USER
    orm_model = UserORM
    domain_model = User
    # A user owns its own record
    owner_key = "id"

    async def get_by_email(self, email: str) -> User | None:
        return await self.find_one_by(email=email.strip().lower())

    async def get_with_role(
        self, user_id: UUID, *, include_deleted: bool = False
    ) -> UserWithRole | None:
        stmt = (
            select(UserORM, RoleORM.name)
            .join(RoleORM, UserORM.role_id == RoleORM.id)
            .where(UserORM.id == user_id)
            .execution_options(populate_existing=True)
        )
        if not include_deleted:
            stmt = stmt.where(UserORM.deleted.is_(False))
        res = await self._execute(stmt, "Failed to query user")
        row = res.first()
        if row is None:
            return None
        user_orm, role_name = row
        return UserWithRole(user=self._to_domain(user_orm), role=role_name)

    async def list_with_roles(self, *, offset: int, limit: int) -> list[UserWithRole]:
        stmt = (
            select(UserORM, RoleORM.name)
            .join(RoleORM, UserORM.role_id == RoleORM.id)
            .where(UserORM.deleted.is_(False))
            .order_by(UserORM.created_at.asc(), UserORM.id.asc())
            .offset(offset)
            .limit(limit)
        )
        res = await self._execute(stmt, "Failed to list users")
        return [
            UserWithRole(user=self._to_domain(user_orm), role=role_name)
            for user_orm, role_name in res.all()
        ]
