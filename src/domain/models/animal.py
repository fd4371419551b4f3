from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class Animal:
    id: UUID
    name: str
    species_id: UUID
    breed_id: UUID
    disease_id: UUID | None = None
    characteristic_id: UUID | None = None
    health_status: bool | None = None
    entry_date: date | None = None
    adopted: bool = False
    photos: list[str] = field(default_factory=list)
    information: str | None = None
    # Availability for adoption; independent from the soft-delete flag.
    status: bool = True
    deleted: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        name: str,
        species_id: UUID,
        breed_id: UUID,
        *,
        disease_id: UUID | None = None,
        characteristic_id: UUID | None = None,
        health_status: bool | None = None,
        entry_date: date | None = None,
        adopted: bool = False,
        photos: list[str] | None = None,
        information: str | None = None,
        status: bool = True,
    ) -> Animal:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            name=name.strip(),
            species_id=species_id,
            breed_id=breed_id,
            disease_id=disease_id,
            characteristic_id=characteristic_id,
            health_status=health_status,
            entry_date=entry_date,
            adopted=adopted,
            photos=list(photos or []),
            information=information,
            status=status,
            created_at=now,
            updated_at=now,
        )
