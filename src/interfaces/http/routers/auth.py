from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from src.application.errors import AuthError
from src.application.use_cases.auth import login_user, refresh_token
from src.application.use_cases.users import register_user
from src.config.settings import Settings
from src.infrastructure.auth.jwt_service import JWTService
from src.infrastructure.auth.password import PasswordHasher
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.interfaces.http.deps import (
    get_app_settings,
    get_jwt_service,
    get_password_hasher,
    get_uow,
)
from src.interfaces.http.responses import render
from src.interfaces.http.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RefreshRequest,
    RegisterRequest,
    TokenResponse,
)
from src.interfaces.http.schemas.users import UserResponse

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)

REFRESH_COOKIE = "refresh_token"


def _wants_refresh_in_body(request: Request) -> bool:
    return (
        request.headers.get("X-Mobile-Client") == "1"
        or request.headers.get("X-Return-Refresh") == "1"
    )


def _set_refresh_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        key=REFRESH_COOKIE,
        value=token,
        httponly=True,
        samesite=settings.cookie_samesite,
        secure=settings.cookie_secure,
        path="/",
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    payload: LoginRequest,
    response: Response,
    request: Request,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    jwt_service: JWTService = Depends(get_jwt_service),
    settings: Settings = Depends(get_app_settings),
) -> LoginResponse:
    result = await login_user.execute(
        uow=uow,
        payload=login_user.LoginInput(email=payload.email, password=payload.password),
        password_hasher=password_hasher,
        jwt_service=jwt_service,
        refresh_expires_days=settings.jwt_refresh_token_expires_days,
    )
    _set_refresh_cookie(response, result.refresh_token, settings)
    logger.info("User %s logged in", result.user_id)
    return LoginResponse(
        access_token=result.access_token,
        token_type=result.token_type,
        user_id=result.user_id,
        email=result.email,
        role=result.role,
        refresh_token=result.refresh_token if _wants_refresh_in_body(request) else None,
    )


@router.post("/register", status_code=201)
async def register(
    payload: RegisterRequest,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    settings: Settings = Depends(get_app_settings),
) -> JSONResponse:
    result = await register_user.execute(
        uow,
        payload=register_user.RegisterUserInput(
            name=payload.name, email=payload.email, password=payload.password
        ),
        password_hasher=password_hasher,
        default_role=settings.default_role,
    )
    return render(result, UserResponse, created=True)


@router.post("/refresh", response_model=TokenResponse)
async def refresh(
    request: Request,
    response: Response,
    body: RefreshRequest | None = None,
    uow: SQLAlchemyUnitOfWork = Depends(get_uow),
    jwt_service: JWTService = Depends(get_jwt_service),
    settings: Settings = Depends(get_app_settings),
) -> TokenResponse:
    # Cookie first, then JSON body
    token = request.cookies.get(REFRESH_COOKIE) or (body.refresh_token if body else None)
    if not token:
        raise AuthError("Missing refresh token")
    result = await refresh_token.execute(
        uow=uow,
        refresh_token=token,
        jwt_service=jwt_service,
        refresh_expires_days=settings.jwt_refresh_token_expires_days,
    )
    _set_refresh_cookie(response, result.refresh_token, settings)
    return TokenResponse(
        access_token=result.access_token,
        token_type=result.token_type,
        refresh_token=result.refresh_token if _wants_refresh_in_body(request) else None,
    )


@router.post("/logout")
async def logout(response: Response) -> dict[str, str]:
    response.delete_cookie(key=REFRESH_COOKIE, path="/")
    return {"status": "ok"}
