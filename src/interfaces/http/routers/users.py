from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from src.application.use_cases.users import (
    get_user,
    list_users,
    register_user,
    toggle_user,
    update_user,
)
from src.config.settings import Settings
from src.domain.models.principal import Principal
from src.infrastructure.auth.password import PasswordHasher
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.interfaces.http.deps import (
    ADMIN_ONLY,
    ALL_ROLES,
    get_app_settings,
    get_password_hasher,
    get_uow,
    require_roles,
)
from src.interfaces.http.responses import render
from src.interfaces.http.schemas.users import UserCreate, UserResponse, UserUpdate

router = APIRouter(prefix="/users", tags=["users"])

anyone = require_roles(*ALL_ROLES)
admin = require_roles(*ADMIN_ONLY)


@router.post("/", status_code=201)
async def create(
    payload: UserCreate,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    settings: Settings = Depends(get_app_settings),
    caller: Principal = Depends(admin),
) -> JSONResponse:
    result = await register_user.execute(
        uow,
        payload=register_user.RegisterUserInput(
            name=payload.name, email=payload.email, password=payload.password, role=payload.role
        ),
        password_hasher=password_hasher,
        requester=caller,
        default_role=settings.default_role,
    )
    return render(result, UserResponse, created=True)


@router.get("/")
async def find_all(
    page: int = Query(1),
    page_size: int | None = Query(None),
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    settings: Settings = Depends(get_app_settings),
    _: Principal = Depends(admin),
) -> JSONResponse:
    result = await list_users.execute(
        uow,
        page=page,
        page_size=page_size or settings.default_page_size,
        max_page_size=settings.max_page_size,
    )
    return render(result, UserResponse)


@router.get("/me")
async def read_me(
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    caller: Principal = Depends(anyone),
) -> JSONResponse:
    result = await get_user.me(uow, caller=caller)
    return render(result, UserResponse)


@router.get("/{user_id}")
async def find_one(
    user_id: UUID,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    caller: Principal = Depends(anyone),
) -> JSONResponse:
    result = await get_user.find_one(uow, caller=caller, record_id=user_id)
    return render(result, UserResponse)


@router.patch("/{user_id}")
async def update(
    user_id: UUID,
    payload: UserUpdate,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    caller: Principal = Depends(anyone),
) -> JSONResponse:
    result = await update_user.execute(
        uow,
        caller=caller,
        record_id=user_id,
        changes=payload.model_dump(exclude_unset=True),
        password_hasher=password_hasher,
    )
    return render(result, UserResponse)


@router.patch("/{user_id}/remove")
async def remove(
    user_id: UUID,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    caller: Principal = Depends(anyone),
) -> JSONResponse:
    result = await toggle_user.remove(uow, caller=caller, record_id=user_id)
    return render(result)


@router.patch("/{user_id}/restore")
async def restore(
    user_id: UUID,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    caller: Principal = Depends(admin),
) -> JSONResponse:
    result = await toggle_user.restore(uow, caller=caller, record_id=user_id)
    return render(result)
