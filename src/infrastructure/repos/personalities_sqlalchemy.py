from __future__ import annotations

from src.domain.models.personality import Personality
from src.domain.value_objects.entity_kind import EntityKind
from src.infrastructure.db.orm.personality import PersonalityORM
from src.infrastructure.repos.base_sqlalchemy import SQLAlchemyGateway


class PersonalitiesSQLAlchemyRepository(SQLAlchemyGateway[Personality]):
    kind = EntityKind.PERSONALITY
    orm_model = PersonalityORM
    domain_model = Personality
