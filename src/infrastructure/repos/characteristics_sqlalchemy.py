from __future__ import annotations

from sqlalchemy import or_, select

from src.domain.models.characteristic import Characteristic
from src.domain.value_objects.entity_kind import EntityKind
from src.infrastructure.db.orm.characteristic import CharacteristicORM
from src.infrastructure.db.orm.personality import PersonalityORM
from src.infrastructure.repos.base_sqlalchemy import SQLAlchemyGateway


class CharacteristicsSQLAlchemyRepository(SQLAlchemyGateway[Characteristic]):
    kind = EntityKind.CHARACTERISTIC
    orm_model = CharacteristicORM
    domain_model = Characteristic
    name_column = None

    async def search_by_personality(self, fragment: str) -> list[Characteristic]:
        stmt = (
            select(CharacteristicORM)
            .join(PersonalityORM, CharacteristicORM.personality_id == PersonalityORM.id)
            .where(
                PersonalityORM.name.icontains(fragment.strip(), autoescape=True),
                CharacteristicORM.deleted.is_(False),
            )
            .order_by(CharacteristicORM.created_at.asc())
        )
        res = await self._execute(stmt, "Failed to search characteristics")
        return [self._to_domain(x) for x in res.scalars().all()]

    async def search_by_keyword(self, keyword: str) -> list[Characteristic]:
        term = keyword.strip()
        stmt = (
            select(CharacteristicORM)
            .where(
                or_(
                    CharacteristicORM.color.icontains(term, autoescape=True),
                    CharacteristicORM.size.icontains(term, autoescape=True),
                    CharacteristicORM.fur.icontains(term, autoescape=True),
                    CharacteristicORM.sex.icontains(term, autoescape=True),
                ),
                CharacteristicORM.deleted.is_(False),
            )
            .order_by(CharacteristicORM.created_at.asc())
        )
        res = await self._execute(stmt, "Failed to search characteristics")
        return [self._to_domain(x) for x in res.scalars().all()]
