from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ClientCreate(BaseModel):
    phone: str = Field(min_length=3, max_length=30)
    birth_date: date
    gender: str = Field(min_length=1, max_length=20)
    address: str | None = Field(default=None, max_length=255)


class ClientUpdate(BaseModel):
    phone: str | None = Field(default=None, min_length=3, max_length=30)
    birth_date: date | None = None
    gender: str | None = Field(default=None, min_length=1, max_length=20)
    address: str | None = Field(default=None, max_length=255)
    # Only administrators and moderators may set this one
    economic_status_id: UUID | None = None


class ClientResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    phone: str
    birth_date: date
    gender: str
    address: str | None
    economic_status_id: UUID | None
    deleted: bool
    created_at: datetime
    updated_at: datetime
