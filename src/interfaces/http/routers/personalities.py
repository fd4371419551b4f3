from __future__ import annotations

from fastapi import APIRouter

from src.application.catalog import PERSONALITIES
from src.interfaces.http.routers.catalog import register_catalog_routes
from src.interfaces.http.schemas.personalities import PersonalityCreate, PersonalityResponse, PersonalityUpdate

router = APIRouter(prefix="/personalities", tags=["personalities"])

register_catalog_routes(
    router,
    PERSONALITIES,
    create_schema=PersonalityCreate,
    update_schema=PersonalityUpdate,
    response_schema=PersonalityResponse,
)
