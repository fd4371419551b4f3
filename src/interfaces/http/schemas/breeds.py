from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class BreedCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    species_id: UUID


class BreedUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    species_id: UUID | None = None


class BreedResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    species_id: UUID
    deleted: bool
    created_at: datetime
    updated_at: datetime
