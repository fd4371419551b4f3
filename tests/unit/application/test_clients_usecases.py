from __future__ import annotations

from datetime import date
from uuid import uuid4

import pytest

from src.application.errors import ConflictError
from src.application.result import FailureReason, ResultKind
from src.application.use_cases.clients import create_client, get_client, update_client
from src.domain.models.economic_status import EconomicStatus
from src.domain.models.principal import Principal
from src.domain.value_objects.entity_kind import EntityKind
from src.domain.value_objects.role import RoleName


@pytest.fixture()
def setup(stub_gateway, uow_factory):
    clients = stub_gateway(EntityKind.CLIENT, owner_key="user_id", name_field=None)
    statuses = stub_gateway(EntityKind.ECONOMIC_STATUS, name_field="level")
    default = EconomicStatus.create("Ninguno")
    high = EconomicStatus.create("Alto")
    statuses.add(default, high)
    return uow_factory(clients, statuses), clients, default, high


def payload() -> create_client.CreateClientInput:
    return create_client.CreateClientInput(
        phone="0991234567", birth_date=date(1992, 3, 14), gender="M"
    )


async def test_user_creates_single_client_with_default_status(setup):
    uow, clients, default, _ = setup
    caller = Principal(id=uuid4(), role=RoleName.USER, display_name="Luis")

    first = await create_client.execute(uow, caller=caller, payload=payload())
    assert first.kind is ResultKind.SUCCESS
    assert first.data.economic_status_id == default.id

    second = await create_client.execute(uow, caller=caller, payload=payload())
    assert second.kind is ResultKind.ERROR
    assert second.reason is FailureReason.DUPLICATE
    assert "already has a client" in second.message
    assert len(clients.records) == 1


async def test_staff_cannot_hold_a_client(setup):
    uow = setup[0]
    caller = Principal(id=uuid4(), role=RoleName.MODERATOR, display_name="Mod")
    result = await create_client.execute(uow, caller=caller, payload=payload())
    assert result.kind is ResultKind.UNAUTHORIZED


async def test_owner_cannot_change_economic_status(setup):
    uow, _, _, high = setup
    owner = Principal(id=uuid4(), role=RoleName.USER, display_name="Luis")
    await create_client.execute(uow, caller=owner, payload=payload())

    denied = await update_client.update_mine(
        uow, caller=owner, changes={"economic_status_id": high.id}
    )
    assert denied.kind is ResultKind.UNAUTHORIZED

    allowed = await update_client.update_mine(uow, caller=owner, changes={"phone": "0980000000"})
    assert allowed.ok
    assert allowed.data.phone == "0980000000"


async def test_admin_changes_economic_status_of_any_client(setup):
    uow, _, _, high = setup
    owner = Principal(id=uuid4(), role=RoleName.USER, display_name="Luis")
    created = await create_client.execute(uow, caller=owner, payload=payload())
    admin = Principal(id=uuid4(), role=RoleName.ADMIN, display_name="Root")

    result = await update_client.execute(
        uow, caller=admin, record_id=created.data.id, changes={"economic_status_id": high.id}
    )
    assert result.ok
    assert result.data.economic_status_id == high.id

    unknown = await update_client.execute(
        uow, caller=admin, record_id=created.data.id, changes={"economic_status_id": uuid4()}
    )
    assert unknown.reason is FailureReason.INVALID_REFERENCE


async def test_exists_for_me(setup):
    uow = setup[0]
    owner = Principal(id=uuid4(), role=RoleName.USER, display_name="Luis")
    before = await get_client.exists_for_me(uow, caller=owner)
    assert before.data is False
    await create_client.execute(uow, caller=owner, payload=payload())
    after = await get_client.exists_for_me(uow, caller=owner)
    assert after.data is True


@pytest.mark.parametrize("field", ["phone", "birth_date", "gender"])
async def test_owner_cannot_clear_required_fields(setup, field):
    uow, clients, _, _ = setup
    owner = Principal(id=uuid4(), role=RoleName.USER, display_name="Luis")
    created = await create_client.execute(uow, caller=owner, payload=payload())

    result = await update_client.update_mine(uow, caller=owner, changes={field: None})
    assert result.kind is ResultKind.INVALID
    assert field in result.message
    assert getattr(clients.records[created.data.id], field) is not None


async def test_constraint_violation_on_update_is_a_conflict(setup):
    uow, clients, _, _ = setup
    owner = Principal(id=uuid4(), role=RoleName.USER, display_name="Luis")
    await create_client.execute(uow, caller=owner, payload=payload())

    async def rejecting(record_id, values):
        raise ConflictError("Failed to update client")

    clients.update_partial = rejecting
    result = await update_client.update_mine(uow, caller=owner, changes={"phone": "0980000000"})
    assert result.kind is ResultKind.ERROR
    assert result.reason is FailureReason.CONFLICT
    assert uow.calls["rollback"] == 1
