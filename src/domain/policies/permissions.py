"""Role and ownership based permission resolution.

Precedence:

1. A privileged role for the action is allowed on any target.
2. The base role is allowed only on records it owns, and never for fields
   reserved to privileged roles.
3. Anything else is denied.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from uuid import UUID

from src.domain.models.principal import Principal
from src.domain.value_objects.role import RoleName


class Action(str, Enum):
    READ = "read"
    # User accounts: admin, or the account owner
    READ_ACCOUNT = "read_account"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    RESTORE = "restore"
    ASSIGN_ROLE = "assign_role"


_STAFF = frozenset({RoleName.ADMIN, RoleName.MODERATOR})
_ADMIN_ONLY = frozenset({RoleName.ADMIN})

PRIVILEGED_ROLES: dict[Action, frozenset[RoleName]] = {
    Action.READ: _STAFF,
    Action.READ_ACCOUNT: _ADMIN_ONLY,
    Action.CREATE: _STAFF,
    Action.UPDATE: _STAFF,
    Action.DELETE: _STAFF,
    Action.RESTORE: _ADMIN_ONLY,
    Action.ASSIGN_ROLE: _ADMIN_ONLY,
}

SELF_SERVICE_ACTIONS = frozenset(
    {Action.READ, Action.READ_ACCOUNT, Action.CREATE, Action.UPDATE, Action.DELETE}
)


@dataclass(slots=True, frozen=True)
class Target:
    owner_id: UUID | None = None
    record_id: UUID | None = None


@dataclass(slots=True, frozen=True)
class Decision:
    allowed: bool
    reason: str | None = None
    self_service: bool = False

    @classmethod
    def allow(cls, *, self_service: bool = False) -> Decision:
        return cls(allowed=True, self_service=self_service)

    @classmethod
    def deny(cls, reason: str) -> Decision:
        return cls(allowed=False, reason=reason)

    def __bool__(self) -> bool:
        return self.allowed


def is_privileged(role: RoleName, action: Action) -> bool:
    return role in PRIVILEGED_ROLES[action]


def resolve(
    caller: Principal,
    target: Target,
    action: Action,
    *,
    changed_fields: Iterable[str] = (),
    privileged_fields: Iterable[str] = (),
) -> Decision:
    if is_privileged(caller.role, action):
        return Decision.allow()

    if (
        caller.role is RoleName.USER
        and action in SELF_SERVICE_ACTIONS
        and caller.owns(target.owner_id)
    ):
        restricted = sorted(set(changed_fields) & set(privileged_fields))
        if restricted:
            return Decision.deny(f"You are not allowed to modify: {', '.join(restricted)}")
        return Decision.allow(self_service=True)

    return Decision.deny(f"Role '{caller.role.value}' is not allowed to {action.value} this record")
