from __future__ import annotations

from typing import Any, Protocol

from src.application.interfaces.repositories.breeds import BreedRepository
from src.application.interfaces.repositories.characteristics import CharacteristicRepository
from src.application.interfaces.repositories.clients import ClientRepository
from src.application.interfaces.repositories.economic_statuses import EconomicStatusRepository
from src.application.interfaces.repositories.gateway import EntityGateway
from src.application.interfaces.repositories.roles import RoleRepository
from src.application.interfaces.repositories.users import UserRepository
from src.domain.value_objects.entity_kind import EntityKind


class UnitOfWork(Protocol):
    roles: RoleRepository
    users: UserRepository
    clients: ClientRepository
    economic_statuses: EconomicStatusRepository
    species: EntityGateway[Any]
    breeds: BreedRepository
    diseases: EntityGateway[Any]
    personalities: EntityGateway[Any]
    characteristics: CharacteristicRepository
    animals: EntityGateway[Any]

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    # Gateway lookup by entity kind, used by the generic use cases
    def gateway(self, kind: EntityKind) -> EntityGateway[Any]: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
