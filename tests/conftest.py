from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator, Callable
from pathlib import Path
from uuid import UUID, uuid4

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.config.settings import Settings
from src.domain.value_objects.economic_level import EconomicLevel
from src.domain.value_objects.role import RoleName
from src.infrastructure.auth.password import PasswordHasher
from src.infrastructure.db.base import Base
from src.infrastructure.db.orm import (  # noqa: F401
    animal,
    breed,
    characteristic,
    client as client_orm,
    disease,
    personality,
    species,
)
from src.infrastructure.db.orm.economic_status import EconomicStatusORM
from src.infrastructure.db.orm.role import RoleORM
from src.infrastructure.db.orm.user import UserORM
from src.interfaces.http.main import create_app

TEST_PASSWORD = "correct-horse-battery"


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "jwt_secret_key": "test-secret",
            "log_level": "INFO",
            "environment": "test",
        }
    )


@pytest.fixture()
def password_hasher() -> PasswordHasher:
    # bcrypt is slow on purpose; a cheaper scheme keeps the suite fast
    return PasswordHasher(schemes=("pbkdf2_sha256",))


@pytest.fixture()
def app(test_settings: Settings, password_hasher: PasswordHasher):
    return create_app(settings=test_settings, password_hasher=password_hasher)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        async with app.state.session_factory() as session:
            session.add_all(
                [RoleORM(id=uuid4(), name=role.value, deleted=False) for role in RoleName]
                + [
                    EconomicStatusORM(id=uuid4(), level=level.value, deleted=False)
                    for level in EconomicLevel
                ]
            )
            await session.commit()
        yield client
        await engine.dispose()


@pytest.fixture()
async def role_ids(app, client) -> dict[str, UUID]:
    from sqlalchemy import select

    async with app.state.session_factory() as session:
        rows = (await session.execute(select(RoleORM.name, RoleORM.id))).all()
    return {name: role_id for name, role_id in rows}


@pytest.fixture()
async def seeded_users(app, client, role_ids, password_hasher) -> dict[str, UUID]:
    accounts = {
        "admin": RoleName.ADMIN,
        "moderator": RoleName.MODERATOR,
        "user": RoleName.USER,
        "other": RoleName.USER,
    }
    hashed = password_hasher.hash(TEST_PASSWORD)
    ids: dict[str, UUID] = {}
    async with app.state.session_factory() as session:
        for key, role in accounts.items():
            user_id = uuid4()
            session.add(
                UserORM(
                    id=user_id,
                    name=key.capitalize(),
                    email=f"{key}@shelter.org",
                    hashed_password=hashed,
                    role_id=role_ids[role.value],
                    deleted=False,
                )
            )
            ids[key] = user_id
        await session.commit()
    return ids


@pytest.fixture()
def auth_headers(app) -> Callable[[UUID], dict[str, str]]:
    def build(user_id: UUID) -> dict[str, str]:
        token = app.state.jwt_service.create_access_token(subject=user_id)
        return {"Authorization": f"Bearer {token}"}

    return build


@pytest.fixture()
def headers(seeded_users, auth_headers) -> dict[str, dict[str, str]]:
    return {key: auth_headers(user_id) for key, user_id in seeded_users.items()}


@pytest.fixture()
def test_password() -> str:
    return TEST_PASSWORD
