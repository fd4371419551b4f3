from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CharacteristicCreate(BaseModel):
    personality_id: UUID | None = None
    color: str | None = Field(default=None, max_length=50)
    size: str | None = Field(default=None, max_length=50)
    weight: Decimal | None = Field(default=None, ge=0)
    fur: str | None = Field(default=None, max_length=50)
    sex: str | None = Field(default=None, max_length=20)
    age: int | None = Field(default=None, ge=0)
    sterilized: bool = False


class CharacteristicUpdate(BaseModel):
    personality_id: UUID | None = None
    color: str | None = Field(default=None, max_length=50)
    size: str | None = Field(default=None, max_length=50)
    weight: Decimal | None = Field(default=None, ge=0)
    fur: str | None = Field(default=None, max_length=50)
    sex: str | None = Field(default=None, max_length=20)
    age: int | None = Field(default=None, ge=0)
    sterilized: bool | None = None


class CharacteristicResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    personality_id: UUID | None
    color: str | None
    size: str | None
    weight: Decimal | None
    fur: str | None
    sex: str | None
    age: int | None
    sterilized: bool
    deleted: bool
    created_at: datetime
    updated_at: datetime
