from __future__ import annotations

from src.domain.models.species import Species
from src.domain.value_objects.entity_kind import EntityKind
from src.infrastructure.db.orm.species import SpeciesORM
from src.infrastructure.repos.base_sqlalchemy import SQLAlchemyGateway


class SpeciesSQLAlchemyRepository(SQLAlchemyGateway[Species]):
    kind = EntityKind.SPECIES
    orm_model = SpeciesORM
    domain_model = Species
