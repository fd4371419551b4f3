from __future__ import annotations

from fastapi import APIRouter

from src.application.catalog import SPECIES
from src.interfaces.http.routers.catalog import register_catalog_routes
from src.interfaces.http.schemas.species import SpeciesCreate, SpeciesResponse, SpeciesUpdate

router = APIRouter(prefix="/species", tags=["species"])

register_catalog_routes(
    router,
    SPECIES,
    create_schema=SpeciesCreate,
    update_schema=SpeciesUpdate,
    response_schema=SpeciesResponse,
)
