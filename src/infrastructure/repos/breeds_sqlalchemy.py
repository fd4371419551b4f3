from __future__ import annotations

from uuid import UUID

from src.domain.models.breed import Breed
from src.domain.value_objects.entity_kind import EntityKind
from src.infrastructure.db.orm.breed import BreedORM
from src.infrastructure.repos.base_sqlalchemy import SQLAlchemyGateway


class BreedsSQLAlchemyRepository(SQLAlchemyGateway[Breed]):
    kind = EntityKind.BREED
    orm_model = BreedORM
    domain_model = Breed

    async def list_by_species(self, species_id: UUID) -> list[Breed]:
        return await self.find_many_by(species_id=species_id, deleted=False)
