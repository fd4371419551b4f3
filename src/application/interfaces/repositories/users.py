from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.application.interfaces.repositories.gateway import EntityGateway
from src.domain.models.user import User, UserWithRole


class UserRepository(EntityGateway[User], Protocol):
    async def get_by_email(self, email: str) -> User | None: ...

    async def get_with_role(
        self, user_id: UUID, *, include_deleted: bool = False
    ) -> UserWithRole | None: ...

    async def list_with_roles(self, *, offset: int, limit: int) -> list[UserWithRole]: ...
