from __future__ import annotations

from enum import Enum


class RoleName(str, Enum):
    ADMIN = "admin"
    MODERATOR = "moderator"
    USER = "user"

    @classmethod
    def parse(cls, value: str) -> RoleName:
        """Map a stored/claimed role string onto the closed role set.

        Raises ``ValueError`` for anything outside the set so that unknown
        roles are rejected where the identity is built.
        """
        return cls(value.strip().lower())
