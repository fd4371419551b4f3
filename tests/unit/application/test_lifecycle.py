from __future__ import annotations

from datetime import date
from uuid import uuid4

import pytest

from src.application.errors import ConflictError, InfrastructureError
from src.application.result import FailureReason, ResultKind
from src.application.services.boundary import GENERIC_FAILURE_MESSAGE
from src.application.services.lifecycle import toggle_delete
from src.domain.models.client import Client
from src.domain.models.principal import Principal
from src.domain.models.user import User
from src.domain.value_objects.entity_kind import EntityKind
from src.domain.value_objects.role import RoleName


@pytest.fixture()
def world(stub_gateway, uow_factory):
    users = stub_gateway(EntityKind.USER, owner_key="id")
    clients = stub_gateway(EntityKind.CLIENT, owner_key="user_id", name_field=None)
    user = User.create("Ana", "ana@shelter.org", "hashed", role_id=uuid4())
    client = Client.create(user.id, "0999999999", date(1990, 5, 1), "F")
    users.add(user)
    clients.add(client)
    uow = uow_factory(users, clients)
    return uow, users, clients, user, client


def admin() -> Principal:
    return Principal(id=uuid4(), role=RoleName.ADMIN, display_name="Root")


async def test_delete_cascades_to_linked_user(world):
    uow, users, clients, user, client = world
    result = await toggle_delete(
        uow, kind=EntityKind.CLIENT, record_id=client.id, deleted=True, caller=admin()
    )
    assert result.kind is ResultKind.SUCCESS
    assert clients.records[client.id].deleted
    assert users.records[user.id].deleted
    assert result.data.linked.kind is EntityKind.USER
    assert result.message == f"Admin Root removed client {client.id}"
    assert uow.calls["commit"] == 1


async def test_owner_removes_own_client(world):
    uow, _, clients, user, client = world
    owner = Principal(id=user.id, role=RoleName.USER, display_name="Ana")
    result = await toggle_delete(
        uow, kind=EntityKind.CLIENT, record_id=client.id, deleted=True, caller=owner
    )
    assert result.ok
    assert result.message == "Your client has been removed"
    assert clients.records[client.id].deleted


async def test_owner_cannot_restore(world):
    uow, _, clients, user, client = world
    clients.records[client.id].deleted = True
    owner = Principal(id=user.id, role=RoleName.USER, display_name="Ana")
    result = await toggle_delete(
        uow, kind=EntityKind.CLIENT, record_id=client.id, deleted=False, caller=owner
    )
    assert result.kind is ResultKind.UNAUTHORIZED
    assert clients.records[client.id].deleted


async def test_delete_on_deleted_record_is_invalid_state(world):
    uow, _, clients, _, client = world
    clients.records[client.id].deleted = True
    result = await toggle_delete(
        uow, kind=EntityKind.CLIENT, record_id=client.id, deleted=True, caller=admin()
    )
    assert result.reason is FailureReason.INVALID_STATE
    assert "already deleted" in result.message


async def test_restore_on_active_record_is_invalid_state(world):
    uow, _, _, _, client = world
    result = await toggle_delete(
        uow, kind=EntityKind.CLIENT, record_id=client.id, deleted=False, caller=admin()
    )
    assert result.reason is FailureReason.INVALID_STATE
    assert "already active" in result.message
    assert uow.calls["commit"] == 0


async def test_missing_record_is_not_found(world):
    uow = world[0]
    result = await toggle_delete(
        uow, kind=EntityKind.USER, record_id=uuid4(), deleted=True, caller=admin()
    )
    assert result.reason is FailureReason.NOT_FOUND


async def test_linked_failure_rolls_back_everything(world):
    uow, users, _, _, client = world
    users.fail_set_deleted = True
    result = await toggle_delete(
        uow, kind=EntityKind.CLIENT, record_id=client.id, deleted=True, caller=admin()
    )
    assert result.kind is ResultKind.ERROR
    assert result.message == "Linked user could not be updated; no changes were applied"
    assert uow.calls["rollback"] == 1
    assert uow.calls["commit"] == 0


async def test_lost_race_reports_invalid_state(world):
    uow, _, clients, _, client = world

    async def already_flipped(record_id, deleted, *, expected=None):
        return False

    clients.set_deleted = already_flipped
    result = await toggle_delete(
        uow, kind=EntityKind.CLIENT, record_id=client.id, deleted=True, caller=admin()
    )
    assert result.reason is FailureReason.INVALID_STATE
    assert uow.calls["rollback"] == 1


async def test_persistence_failure_becomes_error_result(world):
    uow, _, clients, _, client = world

    async def broken(record_id, *, include_deleted=False):
        raise InfrastructureError("connection lost")

    clients.get = broken
    result = await toggle_delete(
        uow, kind=EntityKind.CLIENT, record_id=client.id, deleted=True, caller=admin()
    )
    assert result.kind is ResultKind.ERROR
    assert result.reason is FailureReason.UNEXPECTED
    assert result.message == GENERIC_FAILURE_MESSAGE
    assert uow.calls["rollback"] == 1


async def test_commit_conflict_becomes_conflict_result(world):
    uow, _, _, _, client = world

    async def rejecting_commit():
        raise ConflictError("Transaction violates a uniqueness rule")

    uow.commit = rejecting_commit
    result = await toggle_delete(
        uow, kind=EntityKind.CLIENT, record_id=client.id, deleted=True, caller=admin()
    )
    assert result.kind is ResultKind.ERROR
    assert result.reason is FailureReason.CONFLICT
    assert uow.calls["rollback"] == 1
