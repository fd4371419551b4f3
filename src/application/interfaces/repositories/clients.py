from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.application.interfaces.repositories.gateway import EntityGateway
from src.domain.models.client import Client


class ClientRepository(EntityGateway[Client], Protocol):
    async def get_by_user(self, user_id: UUID, *, include_deleted: bool = False) -> Client | None: ...
