from __future__ import annotations

from sqlalchemy import func, select

from src.domain.models.role import Role
from src.domain.value_objects.entity_kind import EntityKind
from src.infrastructure.db.orm.role import RoleORM
from src.infrastructure.repos.base_sqlalchemy import SQLAlchemyGateway


class RolesSQLAlchemyRepository(SQLAlchemyGateway[Role]):
    kind = EntityKind.ROLE
    orm_model = RoleORM
    domain_model = Role

    async def get_active_by_name(self, name: str) -> Role | None:
        stmt = select(RoleORM).where(
            func.lower(RoleORM.name) == name.strip().lower(), RoleORM.deleted.is_(False)
        )
        res = await self._execute(stmt, "Failed to query role")
        orm = res.scalar_one_or_none()
        return self._to_domain(orm) if orm else None
