from __future__ import annotations

from uuid import uuid4

import pytest

from src.application.catalog import BREEDS, ROLES, SPECIES
from src.application.result import FailureReason, ResultKind
from src.application.use_cases.catalog import (
    create_record,
    list_records,
    search_records,
    update_record,
)
from src.domain.models.breed import Breed
from src.domain.models.principal import Principal
from src.domain.models.species import Species
from src.domain.value_objects.entity_kind import EntityKind
from src.domain.value_objects.role import RoleName

MODERATOR = Principal(id=uuid4(), role=RoleName.MODERATOR, display_name="Mod")


@pytest.fixture()
def catalog(stub_gateway, uow_factory):
    species = stub_gateway(EntityKind.SPECIES)
    breeds = stub_gateway(EntityKind.BREED)
    roles = stub_gateway(EntityKind.ROLE)
    dog = Species.create("Dog")
    species.add(dog)
    return uow_factory(species, breeds, roles), species, breeds, dog


async def test_duplicate_name_is_case_insensitive(catalog):
    uow, _, breeds, dog = catalog
    first = await create_record.execute(
        uow, entity=BREEDS, caller=MODERATOR, values={"name": "Labrador", "species_id": dog.id}
    )
    assert first.kind is ResultKind.SUCCESS

    second = await create_record.execute(
        uow, entity=BREEDS, caller=MODERATOR, values={"name": "LABRADOR", "species_id": dog.id}
    )
    assert second.reason is FailureReason.DUPLICATE
    assert len(breeds.records) == 1


async def test_reference_must_be_active(catalog):
    uow, species, _, dog = catalog
    species.records[dog.id].deleted = True
    result = await create_record.execute(
        uow, entity=BREEDS, caller=MODERATOR, values={"name": "Beagle", "species_id": dog.id}
    )
    assert result.kind is ResultKind.INVALID
    assert result.reason is FailureReason.INVALID_REFERENCE


async def test_base_role_cannot_create(catalog):
    uow = catalog[0]
    caller = Principal(id=uuid4(), role=RoleName.USER, display_name="u")
    result = await create_record.execute(uow, entity=SPECIES, caller=caller, values={"name": "Cat"})
    assert result.kind is ResultKind.UNAUTHORIZED


async def test_role_names_are_a_closed_set(catalog):
    uow = catalog[0]
    result = await create_record.execute(
        uow, entity=ROLES, caller=MODERATOR, values={"name": "superuser"}
    )
    assert result.kind is ResultKind.INVALID


async def test_empty_update_is_rejected(catalog):
    uow, _, _, dog = catalog
    result = await update_record.execute(
        uow, entity=SPECIES, caller=MODERATOR, record_id=dog.id, changes={}
    )
    assert result.reason is FailureReason.NOTHING_TO_UPDATE


async def test_rename_onto_existing_name_is_duplicate(catalog):
    uow, species, _, dog = catalog
    cat = Species.create("Cat")
    species.add(cat)
    result = await update_record.execute(
        uow, entity=SPECIES, caller=MODERATOR, record_id=cat.id, changes={"name": "dog"}
    )
    assert result.reason is FailureReason.DUPLICATE


async def test_update_of_deleted_record_is_not_found(catalog):
    uow, species, _, dog = catalog
    species.records[dog.id].deleted = True
    result = await update_record.execute(
        uow, entity=SPECIES, caller=MODERATOR, record_id=dog.id, changes={"name": "Hound"}
    )
    assert result.reason is FailureReason.NOT_FOUND


async def test_update_applies_only_present_fields(catalog):
    uow, _, breeds, dog = catalog
    breed = Breed.create("Pug", dog.id)
    breeds.add(breed)
    result = await update_record.execute(
        uow, entity=BREEDS, caller=MODERATOR, record_id=breed.id, changes={"name": "Pug Mix"}
    )
    assert result.ok
    assert result.data.name == "Pug Mix"
    assert result.data.species_id == dog.id


async def test_listing_excludes_deleted_and_counts_pages(catalog):
    uow, species, _, dog = catalog
    for index in range(46):
        species.add(Species.create(f"Species {index}"))
    deleted = Species.create("Gone")
    deleted.deleted = True
    species.add(deleted)

    result = await list_records.execute(uow, entity=SPECIES, page=4, page_size=15)
    assert result.data.total_count == 47
    assert result.data.total_pages == 4
    assert len(result.data.items) == 2

    bad = await list_records.execute(uow, entity=SPECIES, page=0, page_size=15)
    assert bad.kind is ResultKind.INVALID


async def test_search_without_matches_is_a_warning(catalog):
    uow = catalog[0]
    found = await search_records.execute(uow, entity=SPECIES, fragment="DO")
    assert found.kind is ResultKind.SUCCESS
    assert len(found.data) == 1

    missing = await search_records.execute(uow, entity=SPECIES, fragment="zebra")
    assert missing.kind is ResultKind.WARNING
    assert missing.data == []


@pytest.mark.parametrize("field", ["name", "species_id"])
async def test_clearing_a_required_field_is_invalid(catalog, field):
    uow, _, breeds, dog = catalog
    breed = Breed.create("Pug", dog.id)
    breeds.add(breed)
    result = await update_record.execute(
        uow, entity=BREEDS, caller=MODERATOR, record_id=breed.id, changes={field: None}
    )
    assert result.kind is ResultKind.INVALID
    assert result.reason is FailureReason.INVALID_INPUT
    assert field in result.message
    assert breeds.records[breed.id].name == "Pug"
    assert uow.calls["commit"] == 0
