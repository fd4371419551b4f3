"""Existence and lifecycle-state checks that gate every mutating operation."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any
from uuid import UUID

from src.application.interfaces.repositories.gateway import EntityGateway
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.value_objects.entity_kind import EntityKind, KeyType


class RecordState(str, Enum):
    MISSING = "missing"
    ACTIVE = "active"
    DELETED = "deleted"


def key_column(gateway: EntityGateway[Any], key_type: KeyType) -> str:
    if key_type is KeyType.ID:
        return "id"
    if gateway.owner_key is None:
        raise ValueError(f"{gateway.kind.value} records have no owner key")
    return gateway.owner_key


async def exists(
    uow: UnitOfWork,
    kind: EntityKind,
    key_type: KeyType,
    key_value: UUID,
    deleted: bool = False,
) -> bool:
    """True only when a row matches the key *and* carries the given flag.

    A row in the other lifecycle state counts as not found.
    """
    gateway = uow.gateway(kind)
    return await gateway.exists_by(**{key_column(gateway, key_type): key_value, "deleted": deleted})


def state_of(record: Any | None) -> RecordState:
    if record is None:
        return RecordState.MISSING
    return RecordState.DELETED if record.deleted else RecordState.ACTIVE


async def missing_references(
    uow: UnitOfWork, references: Mapping[str, tuple[EntityKind, UUID | None]]
) -> list[str]:
    """Names of the referenced fields whose target is absent or soft-deleted."""
    missing: list[str] = []
    for field_name, (kind, value) in references.items():
        if value is None:
            continue
        if not await exists(uow, kind, KeyType.ID, value, deleted=False):
            missing.append(field_name)
    return missing
