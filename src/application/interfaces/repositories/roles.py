from __future__ import annotations

from typing import Protocol

from src.application.interfaces.repositories.gateway import EntityGateway
from src.domain.models.role import Role


class RoleRepository(EntityGateway[Role], Protocol):
    async def get_active_by_name(self, name: str) -> Role | None: ...
