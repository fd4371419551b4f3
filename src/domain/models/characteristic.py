from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4


@dataclass(slots=True)
class Characteristic:
    id: UUID
    personality_id: UUID | None = None
    color: str | None = None
    size: str | None = None
    weight: Decimal | None = None
    fur: str | None = None
    sex: str | None = None
    age: int | None = None
    sterilized: bool = False
    deleted: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        *,
        personality_id: UUID | None = None,
        color: str | None = None,
        size: str | None = None,
        weight: Decimal | None = None,
        fur: str | None = None,
        sex: str | None = None,
        age: int | None = None,
        sterilized: bool = False,
    ) -> Characteristic:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            personality_id=personality_id,
            color=color,
            size=size,
            weight=weight,
            fur=fur,
            sex=sex,
            age=age,
            sterilized=sterilized,
            created_at=now,
            updated_at=now,
        )
