from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict


class EconomicStatusResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    level: str
