from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from src.application.errors import ConflictError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.result import Result
from src.application.services.boundary import result_boundary
from src.domain.models.client import Client
from src.domain.models.principal import Principal
from src.domain.value_objects.economic_level import DEFAULT_ECONOMIC_LEVEL
from src.domain.value_objects.role import RoleName

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateClientInput:
    phone: str
    birth_date: date
    gender: str
    address: str | None = None


@result_boundary("create_client")
async def execute(uow: UnitOfWork, *, caller: Principal, payload: CreateClientInput) -> Result[Client]:
    # Only base-role users hold a client profile; staff manage them
    if caller.role is not RoleName.USER:
        return Result.unauthorized("Only users with the 'user' role can create a client profile")

    existing = await uow.clients.get_by_user(caller.id, include_deleted=True)
    if existing is not None:
        return Result.duplicate("User already has a client")

    default_status = await uow.economic_statuses.get_by_level(DEFAULT_ECONOMIC_LEVEL.value)
    if default_status is None:
        logger.warning("Default economic status %s is not seeded", DEFAULT_ECONOMIC_LEVEL.value)

    client = Client.create(
        caller.id,
        payload.phone,
        payload.birth_date,
        payload.gender,
        address=payload.address,
        economic_status_id=default_status.id if default_status else None,
    )
    try:
        created = await uow.clients.insert(client)
        await uow.commit()
    except ConflictError:
        await uow.rollback()
        return Result.duplicate("User already has a client")
    return Result.success("Client created successfully", created)
