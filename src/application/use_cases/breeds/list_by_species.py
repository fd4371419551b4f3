from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.result import Result
from src.application.services.boundary import result_boundary
from src.application.services.existence import exists
from src.domain.models.breed import Breed
from src.domain.value_objects.entity_kind import EntityKind, KeyType


@result_boundary("find_breeds_by_species")
async def execute(uow: UnitOfWork, *, species_id: UUID) -> Result[list[Breed]]:
    if not await exists(uow, EntityKind.SPECIES, KeyType.ID, species_id, deleted=False):
        return Result.not_found("Species not found")
    breeds = await uow.breeds.list_by_species(species_id)
    if not breeds:
        return Result.warning("No breeds registered for this species", [])
    return Result.success("Breeds found", breeds)
