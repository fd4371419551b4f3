from __future__ import annotations

from src.domain.models.economic_status import EconomicStatus
from src.domain.value_objects.entity_kind import EntityKind
from src.infrastructure.db.orm.economic_status import EconomicStatusORM
from src.infrastructure.repos.base_sqlalchemy import SQLAlchemyGateway


class EconomicStatusesSQLAlchemyRepository(SQLAlchemyGateway[EconomicStatus]):
    kind = EntityKind.ECONOMIC_STATUS
    orm_model = EconomicStatusORM
    domain_model = EconomicStatus
    name_column = "level"

    async def get_by_level(self, level: str) -> EconomicStatus | None:
        return await self.find_by_name(level)
