from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class AnimalCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    species_id: UUID
    breed_id: UUID
    disease_id: UUID | None = None
    characteristic_id: UUID | None = None
    health_status: bool | None = None
    entry_date: date | None = None
    adopted: bool = False
    photos: list[str] = Field(default_factory=list)
    information: str | None = None
    status: bool = True


class AnimalUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    species_id: UUID | None = None
    breed_id: UUID | None = None
    disease_id: UUID | None = None
    characteristic_id: UUID | None = None
    health_status: bool | None = None
    entry_date: date | None = None
    adopted: bool | None = None
    photos: list[str] | None = None
    information: str | None = None
    status: bool | None = None


class AnimalResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    species_id: UUID
    breed_id: UUID
    disease_id: UUID | None
    characteristic_id: UUID | None
    health_status: bool | None
    entry_date: date | None
    adopted: bool
    photos: list[str]
    information: str | None
    status: bool
    deleted: bool
    created_at: datetime
    updated_at: datetime
