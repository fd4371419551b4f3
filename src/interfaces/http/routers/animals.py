from __future__ import annotations

from fastapi import APIRouter

from src.application.catalog import ANIMALS
from src.interfaces.http.routers.catalog import register_catalog_routes
from src.interfaces.http.schemas.animals import AnimalCreate, AnimalResponse, AnimalUpdate

router = APIRouter(prefix="/animals", tags=["animals"])

register_catalog_routes(
    router,
    ANIMALS,
    create_schema=AnimalCreate,
    update_schema=AnimalUpdate,
    response_schema=AnimalResponse,
)
