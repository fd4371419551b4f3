from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from src.application.catalog import CHARACTERISTICS
from src.application.use_cases.catalog import search_records
from src.domain.models.principal import Principal
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.interfaces.http.deps import ALL_ROLES, get_uow, require_roles
from src.interfaces.http.responses import render
from src.interfaces.http.routers.catalog import register_catalog_routes
from src.interfaces.http.schemas.characteristics import (
    CharacteristicCreate,
    CharacteristicResponse,
    CharacteristicUpdate,
)

router = APIRouter(prefix="/characteristics", tags=["characteristics"])


@router.get("/personality")
async def find_by_personality(
    name: str = Query(""),
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    _: Principal = Depends(require_roles(*ALL_ROLES)),
) -> JSONResponse:
    result = await search_records.by_personality(uow, entity=CHARACTERISTICS, fragment=name)
    return render(result, CharacteristicResponse)


@router.get("/keyword")
async def find_by_keyword(
    keyword: str = Query(""),
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    _: Principal = Depends(require_roles(*ALL_ROLES)),
) -> JSONResponse:
    result = await search_records.by_keyword(uow, entity=CHARACTERISTICS, keyword=keyword)
    return render(result, CharacteristicResponse)


register_catalog_routes(
    router,
    CHARACTERISTICS,
    create_schema=CharacteristicCreate,
    update_schema=CharacteristicUpdate,
    response_schema=CharacteristicResponse,
    searchable=False,
)
