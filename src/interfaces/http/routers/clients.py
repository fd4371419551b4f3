from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from src.application.use_cases.clients import (
    create_client,
    get_client,
    list_clients,
    toggle_client,
    update_client,
)
from src.config.settings import Settings
from src.domain.models.principal import Principal
from src.domain.value_objects.role import RoleName
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.interfaces.http.deps import (
    ADMIN_ONLY,
    STAFF_ROLES,
    get_app_settings,
    get_uow,
    require_roles,
)
from src.interfaces.http.responses import render
from src.interfaces.http.schemas.clients import ClientCreate, ClientResponse, ClientUpdate

router = APIRouter(prefix="/clients", tags=["clients"])

base_user = require_roles(RoleName.USER)
staff = require_roles(*STAFF_ROLES)
admin = require_roles(*ADMIN_ONLY)


@router.post("/", status_code=201)
async def create(
    payload: ClientCreate,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    caller: Principal = Depends(base_user),
) -> JSONResponse:
    result = await create_client.execute(
        uow,
        caller=caller,
        payload=create_client.CreateClientInput(
            phone=payload.phone,
            birth_date=payload.birth_date,
            gender=payload.gender,
            address=payload.address,
        ),
    )
    return render(result, ClientResponse, created=True)


@router.get("/")
async def find_all(
    page: int = Query(1),
    page_size: int | None = Query(None),
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    settings: Settings = Depends(get_app_settings),
    _: Principal = Depends(staff),
) -> JSONResponse:
    result = await list_clients.execute(
        uow,
        page=page,
        page_size=page_size or settings.default_page_size,
        max_page_size=settings.max_page_size,
    )
    return render(result, ClientResponse)


@router.get("/me")
async def find_mine(
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    caller: Principal = Depends(base_user),
) -> JSONResponse:
    result = await get_client.find_mine(uow, caller=caller)
    return render(result, ClientResponse)


@router.get("/me/exists")
async def exists_for_me(
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    caller: Principal = Depends(base_user),
) -> JSONResponse:
    result = await get_client.exists_for_me(uow, caller=caller)
    return render(result)


@router.patch("/me")
async def update_mine(
    payload: ClientUpdate,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    caller: Principal = Depends(base_user),
) -> JSONResponse:
    result = await update_client.update_mine(
        uow, caller=caller, changes=payload.model_dump(exclude_unset=True)
    )
    return render(result, ClientResponse)


@router.patch("/me/remove")
async def remove_mine(
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    caller: Principal = Depends(base_user),
) -> JSONResponse:
    result = await toggle_client.remove_mine(uow, caller=caller)
    return render(result)


@router.get("/{client_id}")
async def find_one(
    client_id: UUID,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    caller: Principal = Depends(staff),
) -> JSONResponse:
    result = await get_client.find_one(uow, caller=caller, record_id=client_id)
    return render(result, ClientResponse)


@router.patch("/{client_id}")
async def update(
    client_id: UUID,
    payload: ClientUpdate,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    caller: Principal = Depends(staff),
) -> JSONResponse:
    result = await update_client.execute(
        uow, caller=caller, record_id=client_id, changes=payload.model_dump(exclude_unset=True)
    )
    return render(result, ClientResponse)


@router.patch("/{client_id}/remove")
async def remove(
    client_id: UUID,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    caller: Principal = Depends(staff),
) -> JSONResponse:
    result = await toggle_client.remove(uow, caller=caller, record_id=client_id)
    return render(result)


@router.patch("/{client_id}/restore")
async def restore(
    client_id: UUID,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    caller: Principal = Depends(admin),
) -> JSONResponse:
    result = await toggle_client.restore(uow, caller=caller, record_id=client_id)
    return render(result)
