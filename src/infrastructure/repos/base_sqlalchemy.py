from __future__ import annotations

from dataclasses import fields
from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError, InfrastructureError
from src.domain.value_objects.entity_kind import EntityKind

T = TypeVar("T")


class SQLAlchemyGateway(Generic[T]):
    """Soft-delete aware data access for one ORM model.

    Subclasses only declare the model pair; ORM attribute names match the
    domain dataclass fields one to one.
    """

    kind: EntityKind
    orm_model: type[Any]
    domain_model: type[T]
    name_column: str | None = "name"
    owner_key: str | None = None

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: Any) -> T:
        return self.domain_model(**{f.name: getattr(orm, f.name) for f in fields(self.domain_model)})

    def _to_orm(self, entity: T) -> Any:
        return self.orm_model(**{f.name: getattr(entity, f.name) for f in fields(self.domain_model)})

    def _criteria(self, filters: dict[str, Any]) -> list[Any]:
        return [getattr(self.orm_model, key) == value for key, value in filters.items()]

    async def _execute(self, stmt: Any, failure: str) -> Any:
        try:
            return await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise InfrastructureError(failure) from exc

    async def exists_by(self, **filters: Any) -> bool:
        stmt = select(self.orm_model.id).where(*self._criteria(filters)).limit(1)
        res = await self._execute(stmt, f"Failed to query {self.kind.value}")
        return res.scalar_one_or_none() is not None

    async def find_one_by(self, **filters: Any) -> T | None:
        stmt = (
            select(self.orm_model)
            .where(*self._criteria(filters))
            .limit(1)
            .execution_options(populate_existing=True)
        )
        res = await self._execute(stmt, f"Failed to query {self.kind.value}")
        orm = res.scalars().first()
        return self._to_domain(orm) if orm else None

    async def get(self, record_id: UUID, *, include_deleted: bool = False) -> T | None:
        filters: dict[str, Any] = {"id": record_id}
        if not include_deleted:
            filters["deleted"] = False
        return await self.find_one_by(**filters)

    async def find_many_by(
        self, *, offset: int = 0, limit: int | None = None, **filters: Any
    ) -> list[T]:
        stmt = (
            select(self.orm_model)
            .where(*self._criteria(filters))
            .order_by(self.orm_model.created_at.asc(), self.orm_model.id.asc())
            .offset(offset)
            .execution_options(populate_existing=True)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        res = await self._execute(stmt, f"Failed to list {self.kind.value}")
        return [self._to_domain(x) for x in res.scalars().all()]

    async def count_by(self, **filters: Any) -> int:
        stmt = select(func.count()).select_from(self.orm_model).where(*self._criteria(filters))
        res = await self._execute(stmt, f"Failed to count {self.kind.value}")
        return int(res.scalar_one())

    async def find_by_name(self, name: str, *, exclude_id: UUID | None = None) -> T | None:
        if self.name_column is None:
            return None
        column = getattr(self.orm_model, self.name_column)
        stmt = select(self.orm_model).where(
            func.lower(column) == name.strip().lower(),
            self.orm_model.deleted.is_(False),
        )
        if exclude_id is not None:
            stmt = stmt.where(self.orm_model.id != exclude_id)
        stmt = stmt.limit(1).execution_options(populate_existing=True)
        res = await self._execute(stmt, f"Failed to query {self.kind.value}")
        orm = res.scalars().first()
        return self._to_domain(orm) if orm else None

    async def search_by_name(self, fragment: str) -> list[T]:
        if self.name_column is None:
            return []
        column = getattr(self.orm_model, self.name_column)
        stmt = (
            select(self.orm_model)
            .where(column.icontains(fragment.strip(), autoescape=True))
            .where(self.orm_model.deleted.is_(False))
            .order_by(column.asc())
            .execution_options(populate_existing=True)
        )
        res = await self._execute(stmt, f"Failed to search {self.kind.value}")
        return [self._to_domain(x) for x in res.scalars().all()]

    async def insert(self, entity: T) -> T:
        orm = self._to_orm(entity)
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError(f"Failed to create {self.kind.value}") from exc
        except SQLAlchemyError as exc:
            raise InfrastructureError(f"Failed to create {self.kind.value}") from exc
        return self._to_domain(orm)

    async def update_partial(self, record_id: UUID, values: dict[str, Any]) -> T | None:
        stmt = (
            update(self.orm_model)
            .where(self.orm_model.id == record_id, self.orm_model.deleted.is_(False))
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        try:
            res = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError(f"Failed to update {self.kind.value}") from exc
        except SQLAlchemyError as exc:
            raise InfrastructureError(f"Failed to update {self.kind.value}") from exc
        if res.rowcount == 0:
            return None
        return await self.get(record_id)

    async def set_deleted(
        self, record_id: UUID, deleted: bool, *, expected: bool | None = None
    ) -> bool:
        stmt = update(self.orm_model).where(self.orm_model.id == record_id)
        if expected is not None:
            stmt = stmt.where(self.orm_model.deleted.is_(expected))
        stmt = stmt.values(deleted=deleted).execution_options(synchronize_session=False)
        res = await self._execute(stmt, f"Failed to change {self.kind.value} state")
        return res.rowcount == 1
