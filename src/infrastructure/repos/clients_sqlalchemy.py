from __future__ import annotations

from uuid import UUID

from src.domain.models.client import Client
from src.domain.value_objects.entity_kind import EntityKind
from src.infrastructure.db.orm.client import ClientORM
from src.infrastructure.repos.base_sqlalchemy import SQLAlchemyGateway


class ClientsSQLAlchemyRepository(SQLAlchemyGateway[Client]):
    kind = EntityKind.CLIENT
    orm_model = ClientORM
    domain_model = Client
    name_column = None
    owner_key = "user_id"

    async def get_by_user(self, user_id: UUID, *, include_deleted: bool = False) -> Client | None:
        if include_deleted:
            return await self.find_one_by(user_id=user_id)
        return await self.find_one_by(user_id=user_id, deleted=False)
