from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.application.use_cases.economic_statuses import list_economic_statuses
from src.domain.models.principal import Principal
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.interfaces.http.deps import ALL_ROLES, get_uow, require_roles
from src.interfaces.http.responses import render
from src.interfaces.http.schemas.economic_statuses import EconomicStatusResponse

router = APIRouter(prefix="/economic-statuses", tags=["economic-statuses"])


@router.get("/")
async def find_all(
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    _: Principal = Depends(require_roles(*ALL_ROLES)),
) -> JSONResponse:
    result = await list_economic_statuses.execute(uow)
    return render(result, EconomicStatusResponse)
