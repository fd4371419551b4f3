from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import AuthError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.infrastructure.auth.jwt_service import JWTService
from src.infrastructure.auth.password import PasswordHasher


@dataclass(slots=True)
class LoginInput:
    email: str
    password: str


@dataclass(slots=True)
class LoginResult:
    access_token: str
    refresh_token: str
    token_type: str
    user_id: UUID
    email: str
    role: str


async def execute(
    *,
    uow: UnitOfWork,
    payload: LoginInput,
    password_hasher: PasswordHasher,
    jwt_service: JWTService,
    refresh_expires_days: int = 30,
) -> LoginResult:
    user = await uow.users.get_by_email(payload.email)
    # Soft-deleted accounts cannot sign in
    if not user or user.deleted:
        raise AuthError("Invalid credentials")
    if not password_hasher.verify(payload.password, user.hashed_password):
        raise AuthError("Invalid credentials")
    if password_hasher.needs_rehash(user.hashed_password):
        await uow.users.update_partial(
            user.id, {"hashed_password": password_hasher.hash(payload.password)}
        )
        await uow.commit()

    with_role = await uow.users.get_with_role(user.id)
    if with_role is None:
        raise AuthError("Invalid credentials")

    token = jwt_service.create_access_token(subject=user.id, extra_claims={"role": with_role.role})
    refresh = jwt_service.create_refresh_token(subject=user.id, expires_days=refresh_expires_days)
    return LoginResult(
        access_token=token,
        refresh_token=refresh,
        token_type="bearer",
        user_id=user.id,
        email=user.email,
        role=with_role.role,
    )
