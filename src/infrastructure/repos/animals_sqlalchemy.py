from __future__ import annotations

from src.domain.models.animal import Animal
from src.domain.value_objects.entity_kind import EntityKind
from src.infrastructure.db.orm.animal import AnimalORM
from src.infrastructure.repos.base_sqlalchemy import SQLAlchemyGateway


class AnimalsSQLAlchemyRepository(SQLAlchemyGateway[Animal]):
    kind = EntityKind.ANIMAL
    orm_model = AnimalORM
    domain_model = Animal
