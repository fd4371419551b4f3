#!/usr/bin/env python3
"""
Script to seed the reference rows and create an administrator account.

This script:
1. Inserts the roles (admin, moderator, user) that are missing
2. Inserts the economic statuses that are missing
3. Creates an admin user (a random password is generated when none is given)

Usage:
  python scripts/create_admin.py --email admin@example.com --name "Admin" [--password SECRET]
"""

import argparse
import asyncio
import secrets
import sys
from pathlib import Path
from uuid import uuid4

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.application.use_cases.users import register_user
from src.config.settings import get_settings
from src.domain.models.economic_status import EconomicStatus
from src.domain.models.principal import Principal
from src.domain.models.role import Role
from src.domain.value_objects.economic_level import EconomicLevel
from src.domain.value_objects.role import RoleName
from src.infrastructure.auth.password import PasswordHasher
from src.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)


async def seed_reference_rows(uow: SQLAlchemyUnitOfWork) -> None:
    for role_name in RoleName:
        if await uow.roles.find_by_name(role_name.value) is None:
            await uow.roles.insert(Role.create(role_name.value))
            print(f"✨ Role created: {role_name.value}")
    for level in EconomicLevel:
        if await uow.economic_statuses.get_by_level(level.value) is None:
            await uow.economic_statuses.insert(EconomicStatus.create(level.value))
            print(f"✨ Economic status created: {level.value}")
    await uow.commit()


async def create_admin(email: str, name: str, password: str | None) -> None:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)
    generated = password is None
    password = password or secrets.token_urlsafe(16)

    try:
        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            await seed_reference_rows(uow)

        # The CLI acts with administrator rights to pick the role
        operator = Principal(id=uuid4(), role=RoleName.ADMIN, display_name="cli")
        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            result = await register_user.execute(
                uow,
                payload=register_user.RegisterUserInput(
                    name=name, email=email, password=password, role=RoleName.ADMIN.value
                ),
                password_hasher=PasswordHasher(),
                requester=operator,
                default_role=settings.default_role,
            )

        if not result.ok:
            print(f"\n❌ {result.message}")
            sys.exit(1)

        print("\n✅ Administrator created successfully!")
        print(f"   User ID: {result.data.id}")
        print(f"   Email: {result.data.email}")
        if generated:
            print(f"   Password: {password}")
            print("   ⚠️  Store it now, it will not be shown again")
    finally:
        await engine.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Create an administrator account")
    parser.add_argument("--email", required=True)
    parser.add_argument("--name", default="Administrator")
    parser.add_argument("--password", default=None)
    args = parser.parse_args()
    asyncio.run(create_admin(args.email, args.name, args.password))


if __name__ == "__main__":
    main()
