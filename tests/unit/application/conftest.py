from __future__ import annotations

from dataclasses import replace
from types import SimpleNamespace
from typing import Any
from uuid import UUID

import pytest

from src.application.errors import ConflictError
from src.domain.value_objects.entity_kind import EntityKind

ATTRS = {
    EntityKind.ROLE: "roles",
    EntityKind.USER: "users",
    EntityKind.CLIENT: "clients",
    EntityKind.ECONOMIC_STATUS: "economic_statuses",
    EntityKind.SPECIES: "species",
    EntityKind.BREED: "breeds",
    EntityKind.DISEASE: "diseases",
    EntityKind.PERSONALITY: "personalities",
    EntityKind.CHARACTERISTIC: "characteristics",
    EntityKind.ANIMAL: "animals",
}


class StubGateway:
    """In-memory gateway with the same soft-delete semantics as the SQL one."""

    def __init__(self, kind: EntityKind, *, owner_key: str | None = None, name_field="name"):
        self.kind = kind
        self.owner_key = owner_key
        self.name_field = name_field
        self.records: dict[UUID, Any] = {}
        self.fail_set_deleted = False

    def add(self, *records: Any) -> None:
        for record in records:
            self.records[record.id] = record

    def _matches(self, record: Any, filters: dict[str, Any]) -> bool:
        return all(getattr(record, key) == value for key, value in filters.items())

    async def exists_by(self, **filters):
        return any(self._matches(r, filters) for r in self.records.values())

    async def find_one_by(self, **filters):
        return next((r for r in self.records.values() if self._matches(r, filters)), None)

    async def get(self, record_id, *, include_deleted=False):
        record = self.records.get(record_id)
        if record is None or (record.deleted and not include_deleted):
            return None
        return record

    async def find_many_by(self, *, offset=0, limit=None, **filters):
        rows = [r for r in self.records.values() if self._matches(r, filters)]
        end = None if limit is None else offset + limit
        return rows[offset:end]

    async def count_by(self, **filters):
        return len([r for r in self.records.values() if self._matches(r, filters)])

    async def find_by_name(self, name, *, exclude_id=None):
        if self.name_field is None:
            return None
        for record in self.records.values():
            if record.deleted or record.id == exclude_id:
                continue
            if getattr(record, self.name_field).lower() == name.strip().lower():
                return record
        return None

    async def search_by_name(self, fragment):
        needle = fragment.strip().lower()
        return [
            r
            for r in self.records.values()
            if not r.deleted and needle in getattr(r, self.name_field).lower()
        ]

    async def insert(self, entity):
        if entity.id in self.records:
            raise ConflictError("duplicate id")
        self.records[entity.id] = entity
        return entity

    async def update_partial(self, record_id, values):
        record = self.records.get(record_id)
        if record is None or record.deleted:
            return None
        self.records[record_id] = replace(record, **values)
        return self.records[record_id]

    async def set_deleted(self, record_id, deleted, *, expected=None):
        if self.fail_set_deleted:
            return False
        record = self.records.get(record_id)
        if record is None or (expected is not None and record.deleted is not expected):
            return False
        self.records[record_id] = replace(record, deleted=deleted)
        return True

    # Entity-specific lookups used by the client and user use cases
    async def get_by_user(self, user_id, *, include_deleted=False):
        filters = {"user_id": user_id}
        if not include_deleted:
            filters["deleted"] = False
        return await self.find_one_by(**filters)

    async def get_by_level(self, level):
        return await self.find_by_name(level)

    async def get_by_email(self, email):
        return await self.find_one_by(email=email.strip().lower())

    async def get_active_by_name(self, name):
        return await self.find_by_name(name)


def make_uow(*gateways: StubGateway) -> SimpleNamespace:
    calls = {"commit": 0, "rollback": 0}
    by_kind = {g.kind: g for g in gateways}

    async def commit():
        calls["commit"] += 1

    async def rollback():
        calls["rollback"] += 1

    def gateway(kind: EntityKind):
        return by_kind[kind]

    uow = SimpleNamespace(gateway=gateway, commit=commit, rollback=rollback, calls=calls)
    for kind, gw in by_kind.items():
        setattr(uow, ATTRS[kind], gw)
    return uow


@pytest.fixture()
def stub_gateway():
    return StubGateway


@pytest.fixture()
def uow_factory():
    return make_uow
