from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class User:
    id: UUID
    name: str
    email: str
    hashed_password: str
    role_id: UUID
    deleted: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(cls, name: str, email: str, hashed_password: str, *, role_id: UUID) -> User:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            name=name.strip(),
            email=email.strip().lower(),
            hashed_password=hashed_password,
            role_id=role_id,
            created_at=now,
            updated_at=now,
        )


@dataclass(slots=True)
class UserWithRole:
    user: User
    role: str

    @property
    def id(self) -> UUID:
        return self.user.id

    @property
    def name(self) -> str:
        return self.user.name

    @property
    def email(self) -> str:
        return self.user.email

    @property
    def deleted(self) -> bool:
        return self.user.deleted

    @property
    def created_at(self) -> datetime:
        return self.user.created_at
