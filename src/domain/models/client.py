from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class Client:
    id: UUID
    user_id: UUID
    phone: str
    birth_date: date
    gender: str
    address: str | None = None
    economic_status_id: UUID | None = None
    deleted: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        user_id: UUID,
        phone: str,
        birth_date: date,
        gender: str,
        *,
        address: str | None = None,
        economic_status_id: UUID | None = None,
    ) -> Client:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            user_id=user_id,
            phone=phone.strip(),
            birth_date=birth_date,
            gender=gender.strip().lower(),
            address=address,
            economic_status_id=economic_status_id,
            created_at=now,
            updated_at=now,
        )
