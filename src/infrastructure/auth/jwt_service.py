from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Mapping
from uuid import UUID

from jose import jwt
from jose.exceptions import JWTError

from src.application.errors import AuthError

ACCESS = "access"
REFRESH = "refresh"


class JWTService:
    def __init__(
        self,
        *,
        secret_key: str,
        algorithm: str,
        access_token_expires_minutes: int,
        refresh_token_expires_days: int = 30,
        issuer: str | None = None,
        audience: str | None = None,
    ) -> None:
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.access_token_expires_minutes = access_token_expires_minutes
        self.refresh_token_expires_days = refresh_token_expires_days
        self.issuer = issuer
        self.audience = audience

    def _encode(
        self,
        subject: UUID,
        token_type: str,
        lifetime: timedelta,
        extra_claims: Mapping[str, Any] | None = None,
    ) -> str:
        now = datetime.now(timezone.utc)
        claims: dict[str, Any] = {
            "sub": str(subject),
            "iat": int(now.timestamp()),
            "exp": int((now + lifetime).timestamp()),
            "typ": token_type,
        }
        if self.issuer:
            claims["iss"] = self.issuer
        if self.audience:
            claims["aud"] = self.audience
        if extra_claims:
            # Reserved claims are never overridden by callers
            claims.update({k: v for k, v in extra_claims.items() if k not in claims})
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def create_access_token(
        self, *, subject: UUID, extra_claims: Mapping[str, Any] | None = None
    ) -> str:
        lifetime = timedelta(minutes=self.access_token_expires_minutes)
        return self._encode(subject, ACCESS, lifetime, extra_claims)

    def create_refresh_token(self, *, subject: UUID, expires_days: int | None = None) -> str:
        days = expires_days if expires_days is not None else self.refresh_token_expires_days
        return self._encode(subject, REFRESH, timedelta(days=days))

    def decode(self, token: str) -> dict[str, Any]:
        try:
            return jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                audience=self.audience,
            )
        except JWTError as exc:
            raise AuthError("Token validation failed") from exc

    def decode_refresh(self, token: str) -> dict[str, Any]:
        claims = self.decode(token)
        if claims.get("typ") != REFRESH:
            raise AuthError("Invalid refresh token")
        return claims
