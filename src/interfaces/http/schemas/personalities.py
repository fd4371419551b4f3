from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class PersonalityCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)


class PersonalityUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)


class PersonalityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    deleted: bool
    created_at: datetime
    updated_at: datetime
