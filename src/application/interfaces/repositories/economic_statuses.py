from __future__ import annotations

from typing import Protocol

from src.application.interfaces.repositories.gateway import EntityGateway
from src.domain.models.economic_status import EconomicStatus


class EconomicStatusRepository(EntityGateway[EconomicStatus], Protocol):
    async def get_by_level(self, level: str) -> EconomicStatus | None: ...
