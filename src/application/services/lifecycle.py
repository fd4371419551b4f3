"""Soft-delete / restore coordination.

Records move ``active -> deleted -> active`` only; nothing is removed
physically. When a record belongs to an ownership link (a user and its
client) both sides move inside the same transaction, or neither does.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.result import Result
from src.application.services.boundary import result_boundary
from src.application.services.existence import RecordState, state_of
from src.domain.models.principal import Principal
from src.domain.policies.permissions import Action, Target, resolve
from src.domain.value_objects.entity_kind import EntityKind

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class OwnershipLink:
    owner: EntityKind
    dependent: EntityKind
    # Column on the dependent side pointing at the owner's id
    foreign_key: str


OWNERSHIP_LINKS: tuple[OwnershipLink, ...] = (
    OwnershipLink(owner=EntityKind.USER, dependent=EntityKind.CLIENT, foreign_key="user_id"),
)


@dataclass(slots=True, frozen=True)
class LinkedRecord:
    kind: EntityKind
    record_id: UUID


@dataclass(slots=True, frozen=True)
class ToggleOutcome:
    kind: EntityKind
    record_id: UUID
    deleted: bool
    linked: LinkedRecord | None = None


async def find_linked(uow: UnitOfWork, kind: EntityKind, record: Any) -> LinkedRecord | None:
    for link in OWNERSHIP_LINKS:
        if kind is link.dependent:
            return LinkedRecord(kind=link.owner, record_id=getattr(record, link.foreign_key))
        if kind is link.owner:
            dependent = await uow.gateway(link.dependent).find_one_by(
                **{link.foreign_key: record.id}
            )
            if dependent is not None:
                return LinkedRecord(kind=link.dependent, record_id=dependent.id)
    return None


def owner_of(uow: UnitOfWork, kind: EntityKind, record: Any) -> UUID | None:
    owner_key = uow.gateway(kind).owner_key
    return getattr(record, owner_key) if owner_key else None


def _confirmation(
    caller: Principal, kind: EntityKind, record_id: UUID, deleted: bool, self_service: bool
) -> str:
    verb = "removed" if deleted else "restored"
    if self_service:
        return f"Your {kind.label} has been {verb}"
    return f"{caller.role.value.capitalize()} {caller.display_name} {verb} {kind.label} {record_id}"


@result_boundary("toggle_delete")
async def toggle_delete(
    uow: UnitOfWork,
    *,
    kind: EntityKind,
    record_id: UUID,
    deleted: bool,
    caller: Principal,
) -> Result[ToggleOutcome]:
    gateway = uow.gateway(kind)
    record = await gateway.get(record_id, include_deleted=True)
    state = state_of(record)
    if state is RecordState.MISSING:
        return Result.not_found(f"{kind.label.capitalize()} not found")

    action = Action.DELETE if deleted else Action.RESTORE
    decision = resolve(
        caller, Target(owner_id=owner_of(uow, kind, record), record_id=record_id), action
    )
    if not decision:
        return Result.unauthorized(decision.reason or "Not allowed")

    if deleted and state is RecordState.DELETED:
        return Result.invalid_state(f"{kind.label.capitalize()} is already deleted")
    if not deleted and state is RecordState.ACTIVE:
        return Result.invalid_state(f"{kind.label.capitalize()} is already active")

    linked = await find_linked(uow, kind, record)

    # Conditional write: a concurrent toggle that got here first leaves zero rows
    flipped = await gateway.set_deleted(record_id, deleted, expected=not deleted)
    if not flipped:
        await uow.rollback()
        return Result.invalid_state(
            f"{kind.label.capitalize()} changed state concurrently, nothing was applied"
        )

    if linked is not None:
        linked_ok = await uow.gateway(linked.kind).set_deleted(linked.record_id, deleted)
        if not linked_ok:
            await uow.rollback()
            logger.warning(
                "Cascade failed, rolled back %s %s (linked %s %s)",
                kind.value,
                record_id,
                linked.kind.value,
                linked.record_id,
            )
            return Result.error(
                f"Linked {linked.kind.label} could not be updated; no changes were applied"
            )

    await uow.commit()
    logger.info(
        "%s %s %s by %s",
        kind.value,
        record_id,
        "deleted" if deleted else "restored",
        caller.id,
    )
    return Result.success(
        _confirmation(caller, kind, record_id, deleted, decision.self_service),
        ToggleOutcome(kind=kind, record_id=record_id, deleted=deleted, linked=linked),
    )
