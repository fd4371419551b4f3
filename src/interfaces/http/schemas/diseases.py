from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class DiseaseCreate(BaseModel):
    name: str = Field(default="ninguno", min_length=1, max_length=100)
    severity: str = Field(default="ninguna", min_length=1, max_length=50)


class DiseaseUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    severity: str | None = Field(default=None, min_length=1, max_length=50)


class DiseaseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    severity: str
    deleted: bool
    created_at: datetime
    updated_at: datetime
