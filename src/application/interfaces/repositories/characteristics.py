from __future__ import annotations

from typing import Protocol

from src.application.interfaces.repositories.gateway import EntityGateway
from src.domain.models.characteristic import Characteristic


class CharacteristicRepository(EntityGateway[Characteristic], Protocol):
    async def search_by_personality(self, fragment: str) -> list[Characteristic]: ...

    async def search_by_keyword(self, keyword: str) -> list[Characteristic]: ...
