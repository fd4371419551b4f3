from __future__ import annotations

from uuid import uuid4

import pytest

from src.application.result import FailureReason, ResultKind
from src.application.use_cases.users import get_user, update_user
from src.domain.models.principal import Principal
from src.domain.models.user import User
from src.domain.value_objects.entity_kind import EntityKind
from src.domain.value_objects.role import RoleName
from src.infrastructure.auth.password import PasswordHasher


@pytest.fixture()
def accounts(stub_gateway, uow_factory):
    users = stub_gateway(EntityKind.USER, owner_key="id")
    roles = stub_gateway(EntityKind.ROLE)
    hasher = PasswordHasher(schemes=("pbkdf2_sha256",))
    hashed = hasher.hash("correct-horse-battery")
    ana = User.create("Ana", "ana@shelter.org", hashed, role_id=uuid4())
    users.add(ana)
    return uow_factory(users, roles), users, ana, hasher


@pytest.mark.parametrize("field", ["name", "email", "password"])
async def test_required_fields_cannot_be_cleared(accounts, field):
    uow, users, ana, hasher = accounts
    owner = Principal(id=ana.id, role=RoleName.USER, display_name="Ana")

    result = await update_user.execute(
        uow, caller=owner, record_id=ana.id, changes={field: None}, password_hasher=hasher
    )
    assert result.kind is ResultKind.INVALID
    assert result.reason is FailureReason.INVALID_INPUT
    stored = users.records[ana.id]
    assert stored.name == "Ana"
    assert stored.email == "ana@shelter.org"
    assert hasher.verify("correct-horse-battery", stored.hashed_password)
    assert uow.calls["commit"] == 0


async def test_admin_cannot_clear_role(accounts):
    uow, _, ana, hasher = accounts
    admin = Principal(id=uuid4(), role=RoleName.ADMIN, display_name="Root")
    result = await update_user.execute(
        uow, caller=admin, record_id=ana.id, changes={"role": None}, password_hasher=hasher
    )
    assert result.kind is ResultKind.INVALID


@pytest.mark.parametrize("role", [RoleName.MODERATOR, RoleName.USER])
async def test_only_admin_reads_other_accounts(accounts, role):
    uow, _, ana, _ = accounts
    caller = Principal(id=uuid4(), role=role, display_name=role.value)
    result = await get_user.find_one(uow, caller=caller, record_id=ana.id)
    assert result.kind is ResultKind.UNAUTHORIZED
