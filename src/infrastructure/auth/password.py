from __future__ import annotations

from passlib.context import CryptContext

DEFAULT_SCHEMES: tuple[str, ...] = ("bcrypt",)


class PasswordHasher:
    """Thin wrapper over passlib; tests pass a faster scheme."""

    def __init__(self, schemes: tuple[str, ...] = DEFAULT_SCHEMES) -> None:
        self._pwd_context = CryptContext(schemes=list(schemes), deprecated="auto")

    def hash(self, password: str) -> str:
        return self._pwd_context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        if not hashed_password:
            return False
        return self._pwd_context.verify(plain_password, hashed_password)

    def needs_rehash(self, hashed_password: str) -> bool:
        return self._pwd_context.needs_update(hashed_password)
