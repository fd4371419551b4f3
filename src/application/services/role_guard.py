from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from src.application.result import Result
from src.domain.models.principal import Principal
from src.domain.value_objects.role import RoleName


@dataclass(slots=True, frozen=True)
class RoleGuard:
    """Coarse role check run before a domain operation.

    Ownership is not looked at here; the permission resolver handles that
    once the target record is known.
    """

    allowed: frozenset[RoleName]

    @classmethod
    def of(cls, roles: Iterable[RoleName]) -> RoleGuard:
        return cls(allowed=frozenset(roles))

    def evaluate(self, principal: Principal | None) -> Result[Principal]:
        if principal is None:
            return Result.unauthorized("Authentication required")
        if self.allowed and principal.role not in self.allowed:
            return Result.unauthorized("Access denied: insufficient role")
        return Result.success("Access granted", principal)
