from __future__ import annotations

from collections.abc import Callable
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.application.errors import ConflictError, InfrastructureError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.value_objects.entity_kind import EntityKind


def create_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(database_url, echo=False, future=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


_REPOSITORY_ATTRS: dict[EntityKind, str] = {
    EntityKind.ROLE: "roles",
    EntityKind.USER: "users",
    EntityKind.CLIENT: "clients",
    EntityKind.ECONOMIC_STATUS: "economic_statuses",
    EntityKind.SPECIES: "species",
    EntityKind.BREED: "breeds",
    EntityKind.DISEASE: "diseases",
    EntityKind.PERSONALITY: "personalities",
    EntityKind.CHARACTERISTIC: "characteristics",
    EntityKind.ANIMAL: "animals",
}


class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory
        self.session: AsyncSession | None = None
        self._reset_repositories()

    def _reset_repositories(self) -> None:
        for attr in _REPOSITORY_ATTRS.values():
            setattr(self, attr, None)

    async def __aenter__(self) -> UnitOfWork:
        self.session = self._session_factory()
        from src.infrastructure.repos.animals_sqlalchemy import AnimalsSQLAlchemyRepository
        from src.infrastructure.repos.breeds_sqlalchemy import BreedsSQLAlchemyRepository
        from src.infrastructure.repos.characteristics_sqlalchemy import (
            CharacteristicsSQLAlchemyRepository,
        )
        from src.infrastructure.repos.clients_sqlalchemy import ClientsSQLAlchemyRepository
        from src.infrastructure.repos.diseases_sqlalchemy import DiseasesSQLAlchemyRepository
        from src.infrastructure.repos.economic_statuses_sqlalchemy import (
            EconomicStatusesSQLAlchemyRepository,
        )
        from src.infrastructure.repos.personalities_sqlalchemy import (
            PersonalitiesSQLAlchemyRepository,
        )
        from src.infrastructure.repos.roles_sqlalchemy import RolesSQLAlchemyRepository
        from src.infrastructure.repos.species_sqlalchemy import SpeciesSQLAlchemyRepository
        from src.infrastructure.repos.users_sqlalchemy import UsersSQLAlchemyRepository

        self.roles = RolesSQLAlchemyRepository(self.session)
        self.users = UsersSQLAlchemyRepository(self.session)
        self.clients = ClientsSQLAlchemyRepository(self.session)
        self.economic_statuses = EconomicStatusesSQLAlchemyRepository(self.session)
        self.species = SpeciesSQLAlchemyRepository(self.session)
        self.breeds = BreedsSQLAlchemyRepository(self.session)
        self.diseases = DiseasesSQLAlchemyRepository(self.session)
        self.personalities = PersonalitiesSQLAlchemyRepository(self.session)
        self.characteristics = CharacteristicsSQLAlchemyRepository(self.session)
        self.animals = AnimalsSQLAlchemyRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self.session:
            return
        try:
            if exc:
                await self.session.rollback()
        finally:
            await self.session.close()
            self.session = None
            self._reset_repositories()

    def gateway(self, kind: EntityKind) -> Any:
        repo = getattr(self, _REPOSITORY_ATTRS[kind], None)
        if repo is None:
            raise RuntimeError("Unit of work is not active")
        return repo

    async def commit(self) -> None:
        if not self.session:
            return
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            raise ConflictError("Transaction violates a uniqueness rule") from exc
        except SQLAlchemyError as exc:
            await self.session.rollback()
            raise InfrastructureError("Failed to commit transaction") from exc

    async def rollback(self) -> None:
        if not self.session:
            return
        await self.session.rollback()
