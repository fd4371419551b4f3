from __future__ import annotations

from typing import Any, Protocol, TypeVar
from uuid import UUID

from src.domain.value_objects.entity_kind import EntityKind

T = TypeVar("T")


class EntityGateway(Protocol[T]):
    """Data access shared by every soft-deletable entity.

    ``filters`` are equality filters on column names. Reads never cache: each
    call queries the persisted state.
    """

    kind: EntityKind
    # Column holding the owning user id, when the entity has an owner.
    owner_key: str | None

    async def exists_by(self, **filters: Any) -> bool: ...

    async def find_one_by(self, **filters: Any) -> T | None: ...

    async def get(self, record_id: UUID, *, include_deleted: bool = False) -> T | None: ...

    async def find_many_by(
        self, *, offset: int = 0, limit: int | None = None, **filters: Any
    ) -> list[T]: ...

    async def count_by(self, **filters: Any) -> int: ...

    async def find_by_name(self, name: str, *, exclude_id: UUID | None = None) -> T | None: ...

    async def search_by_name(self, fragment: str) -> list[T]: ...

    async def insert(self, entity: T) -> T: ...

    async def update_partial(self, record_id: UUID, values: dict[str, Any]) -> T | None: ...

    async def set_deleted(
        self, record_id: UUID, deleted: bool, *, expected: bool | None = None
    ) -> bool: ...
