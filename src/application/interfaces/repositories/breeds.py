from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.application.interfaces.repositories.gateway import EntityGateway
from src.domain.models.breed import Breed


class BreedRepository(EntityGateway[Breed], Protocol):
    async def list_by_species(self, species_id: UUID) -> list[Breed]: ...
