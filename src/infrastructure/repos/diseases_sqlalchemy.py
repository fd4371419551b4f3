from __future__ import annotations

from src.domain.models.disease import Disease
from src.domain.value_objects.entity_kind import EntityKind
from src.infrastructure.db.orm.disease import DiseaseORM
from src.infrastructure.repos.base_sqlalchemy import SQLAlchemyGateway


class DiseasesSQLAlchemyRepository(SQLAlchemyGateway[Disease]):
    kind = EntityKind.DISEASE
    orm_model = DiseaseORM
    domain_model = Disease
