from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class EconomicStatus:
    id: UUID
    level: str
    deleted: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(cls, level: str) -> EconomicStatus:
        now = datetime.now(timezone.utc)
        return cls(id=uuid4(), level=level, created_at=now, updated_at=now)
