from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.domain.value_objects.role import RoleName


@dataclass(slots=True, frozen=True)
class Principal:
    """Authenticated caller as handed over by the auth middleware."""

    id: UUID
    role: RoleName
    display_name: str

    def owns(self, owner_id: UUID | None) -> bool:
        return owner_id is not None and owner_id == self.id
