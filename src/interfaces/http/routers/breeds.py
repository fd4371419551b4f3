from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.application.catalog import BREEDS
from src.application.use_cases.breeds import list_by_species
from src.domain.models.principal import Principal
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.interfaces.http.deps import ALL_ROLES, get_uow, require_roles
from src.interfaces.http.responses import render
from src.interfaces.http.routers.catalog import register_catalog_routes
from src.interfaces.http.schemas.breeds import BreedCreate, BreedResponse, BreedUpdate

router = APIRouter(prefix="/breeds", tags=["breeds"])


@router.get("/species/{species_id}")
async def find_by_species(
    species_id: UUID,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    _: Principal = Depends(require_roles(*ALL_ROLES)),
) -> JSONResponse:
    result = await list_by_species.execute(uow, species_id=species_id)
    return render(result, BreedResponse)


register_catalog_routes(
    router,
    BREEDS,
    create_schema=BreedCreate,
    update_schema=BreedUpdate,
    response_schema=BreedResponse,
)
