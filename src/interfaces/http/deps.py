from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable

from fastapi import Request

from src.application.errors import AuthError, PermissionDenied
from src.application.services.role_guard import RoleGuard
from src.config.settings import Settings
from src.domain.models.principal import Principal
from src.domain.value_objects.role import RoleName
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.auth.jwt_service import JWTService
from src.infrastructure.auth.password import PasswordHasher
from src.infrastructure.db.session import SQLAlchemyUnitOfWork

ALL_ROLES = (RoleName.ADMIN, RoleName.MODERATOR, RoleName.USER)
STAFF_ROLES = (RoleName.ADMIN, RoleName.MODERATOR)
ADMIN_ONLY = (RoleName.ADMIN,)


def require_roles(*roles: RoleName) -> Callable[..., Awaitable[Principal]]:
    """Dependency that lets only the listed roles reach the endpoint."""
    guard = RoleGuard.of(roles)

    async def dependency(request: Request) -> Principal:
        context: AuthContext | None = getattr(request.state, "auth_context", None)
        outcome = guard.evaluate(context.principal if context else None)
        if not outcome:
            if context is None:
                raise AuthError(outcome.message)
            raise PermissionDenied(outcome.message)
        return outcome.data

    return dependency


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        yield uow


def get_app_settings(request: Request) -> Settings:
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        raise RuntimeError("Settings not configured")
    return settings


def get_password_hasher(request: Request) -> PasswordHasher:
    hasher = getattr(request.app.state, "password_hasher", None)
    if hasher is None:
        raise RuntimeError("Password hasher not configured")
    return hasher


def get_jwt_service(request: Request) -> JWTService:
    service = getattr(request.app.state, "jwt_service", None)
    if service is None:
        raise RuntimeError("JWT service not configured")
    return service
