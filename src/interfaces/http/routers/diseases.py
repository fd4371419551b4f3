from __future__ import annotations

from fastapi import APIRouter

from src.application.catalog import DISEASES
from src.interfaces.http.routers.catalog import register_catalog_routes
from src.interfaces.http.schemas.diseases import DiseaseCreate, DiseaseResponse, DiseaseUpdate

router = APIRouter(prefix="/diseases", tags=["diseases"])

register_catalog_routes(
    router,
    DISEASES,
    create_schema=DiseaseCreate,
    update_schema=DiseaseUpdate,
    response_schema=DiseaseResponse,
)
