from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import AuthError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.infrastructure.auth.jwt_service import JWTService


@dataclass(slots=True)
class RefreshResult:
    access_token: str
    refresh_token: str
    token_type: str


async def execute(
    *,
    uow: UnitOfWork,
    refresh_token: str,
    jwt_service: JWTService,
    refresh_expires_days: int = 30,
) -> RefreshResult:
    claims = jwt_service.decode_refresh(refresh_token)
    try:
        user_id = UUID(str(claims.get("sub")))
    except ValueError as exc:
        raise AuthError("Invalid refresh token") from exc

    user = await uow.users.get_with_role(user_id)
    if user is None:
        raise AuthError("User is not active")

    return RefreshResult(
        access_token=jwt_service.create_access_token(
            subject=user.id, extra_claims={"role": user.role}
        ),
        refresh_token=jwt_service.create_refresh_token(
            subject=user.id, expires_days=refresh_expires_days
        ),
        token_type="bearer",
    )
