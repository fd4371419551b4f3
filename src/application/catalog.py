"""Descriptors for the entities served by the generic catalog use cases."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from src.domain.models.animal import Animal
from src.domain.models.breed import Breed
from src.domain.models.characteristic import Characteristic
from src.domain.models.disease import Disease
from src.domain.models.personality import Personality
from src.domain.models.role import Role
from src.domain.models.species import Species
from src.domain.value_objects.entity_kind import EntityKind
from src.domain.value_objects.role import RoleName


@dataclass(slots=True, frozen=True)
class CatalogEntity:
    kind: EntityKind
    factory: Callable[..., Any]
    plural: str
    name_field: str | None = "name"
    unique_name: bool = True
    # field name -> kind of the record it must point to (active)
    references: Mapping[str, EntityKind] = field(default_factory=dict)
    # columns a partial update may not clear
    required_fields: frozenset[str] = frozenset({"name"})
    # returns an error message when the values are not acceptable
    validate: Callable[[Mapping[str, Any]], str | None] | None = None

    @property
    def label(self) -> str:
        return self.kind.label

    @property
    def title(self) -> str:
        return self.label.capitalize()


def _validate_role_name(values: Mapping[str, Any]) -> str | None:
    name = values.get("name")
    if name is None:
        return None
    allowed = {role.value for role in RoleName}
    if str(name).strip().lower() not in allowed:
        return f"Role name must be one of: {', '.join(sorted(allowed))}"
    return None


ROLES = CatalogEntity(
    kind=EntityKind.ROLE, factory=Role.create, plural="roles", validate=_validate_role_name
)
SPECIES = CatalogEntity(kind=EntityKind.SPECIES, factory=Species.create, plural="species")
BREEDS = CatalogEntity(
    kind=EntityKind.BREED,
    factory=Breed.create,
    plural="breeds",
    required_fields=frozenset({"name", "species_id"}),
    references={"species_id": EntityKind.SPECIES},
)
DISEASES = CatalogEntity(
    kind=EntityKind.DISEASE,
    factory=Disease.create,
    plural="diseases",
    required_fields=frozenset({"name", "severity"}),
)
PERSONALITIES = CatalogEntity(
    kind=EntityKind.PERSONALITY, factory=Personality.create, plural="personalities"
)
CHARACTERISTICS = CatalogEntity(
    kind=EntityKind.CHARACTERISTIC,
    factory=Characteristic.create,
    plural="characteristics",
    name_field=None,
    unique_name=False,
    required_fields=frozenset({"sterilized"}),
    references={"personality_id": EntityKind.PERSONALITY},
)
ANIMALS = CatalogEntity(
    kind=EntityKind.ANIMAL,
    factory=Animal.create,
    plural="animals",
    unique_name=False,
    required_fields=frozenset({"name", "species_id", "breed_id", "adopted", "photos", "status"}),
    references={
        "species_id": EntityKind.SPECIES,
        "breed_id": EntityKind.BREED,
        "disease_id": EntityKind.DISEASE,
        "characteristic_id": EntityKind.CHARACTERISTIC,
    },
)
