# Endpoint annotations below refer to schema classes bound at call time, so
# this module keeps annotations evaluated eagerly.
from collections.abc import Iterable
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.application.catalog import CatalogEntity
from src.application.use_cases.catalog import (
    create_record,
    get_record,
    list_records,
    search_records,
    toggle_record,
    update_record,
)
from src.config.settings import Settings
from src.domain.models.principal import Principal
from src.domain.value_objects.role import RoleName
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.interfaces.http.deps import (
    ADMIN_ONLY,
    ALL_ROLES,
    STAFF_ROLES,
    get_app_settings,
    get_uow,
    require_roles,
)
from src.interfaces.http.responses import render


def register_catalog_routes(
    router: APIRouter,
    entity: CatalogEntity,
    *,
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    response_schema: type[BaseModel],
    read_roles: Iterable[RoleName] = ALL_ROLES,
    write_roles: Iterable[RoleName] = STAFF_ROLES,
    restore_roles: Iterable[RoleName] = ADMIN_ONLY,
    searchable: bool = True,
) -> APIRouter:
    """Attach the standard create/list/search/get/update/remove/restore routes.

    Routes with extra fixed path segments must be added to ``router`` before
    calling this, otherwise ``/{record_id}`` would shadow them.
    """
    can_read = require_roles(*read_roles)
    can_write = require_roles(*write_roles)
    can_restore = require_roles(*restore_roles)

    @router.post("/", status_code=status.HTTP_201_CREATED)
    async def create(
        payload: create_schema,
        uow: SQLAlchemyUnitOfWork = Depends(get_uow),
        caller: Principal = Depends(can_write),
    ) -> JSONResponse:
        result = await create_record.execute(
            uow, entity=entity, caller=caller, values=payload.model_dump()
        )
        return render(result, response_schema, created=True)

    @router.get("/")
    async def find_all(
        page: int = Query(1),
        page_size: int | None = Query(None),
        uow: SQLAlchemyUnitOfWork = Depends(get_uow),
        settings: Settings = Depends(get_app_settings),
        _: Principal = Depends(can_read),
    ) -> JSONResponse:
        result = await list_records.execute(
            uow,
            entity=entity,
            page=page,
            page_size=page_size or settings.default_page_size,
            max_page_size=settings.max_page_size,
        )
        return render(result, response_schema)

    if searchable:

        @router.get("/search")
        async def find_by_name(
            name: str = Query(""),
            uow: SQLAlchemyUnitOfWork = Depends(get_uow),
            _: Principal = Depends(can_read),
        ) -> JSONResponse:
            result = await search_records.execute(uow, entity=entity, fragment=name)
            return render(result, response_schema)

    @router.get("/{record_id}")
    async def find_one(
        record_id: UUID,
        uow: SQLAlchemyUnitOfWork = Depends(get_uow),
        _: Principal = Depends(can_read),
    ) -> JSONResponse:
        result = await get_record.execute(uow, entity=entity, record_id=record_id)
        return render(result, response_schema)

    @router.patch("/{record_id}")
    async def update(
        record_id: UUID,
        payload: update_schema,
        uow: SQLAlchemyUnitOfWork = Depends(get_uow),
        caller: Principal = Depends(can_write),
    ) -> JSONResponse:
        result = await update_record.execute(
            uow,
            entity=entity,
            caller=caller,
            record_id=record_id,
            changes=payload.model_dump(exclude_unset=True),
        )
        return render(result, response_schema)

    @router.patch("/{record_id}/remove")
    async def remove(
        record_id: UUID,
        uow: SQLAlchemyUnitOfWork = Depends(get_uow),
        caller: Principal = Depends(can_write),
    ) -> JSONResponse:
        result = await toggle_record.remove(uow, entity=entity, caller=caller, record_id=record_id)
        return render(result)

    @router.patch("/{record_id}/restore")
    async def restore(
        record_id: UUID,
        uow: SQLAlchemyUnitOfWork = Depends(get_uow),
        caller: Principal = Depends(can_restore),
    ) -> JSONResponse:
        result = await toggle_record.restore(
            uow, entity=entity, caller=caller, record_id=record_id
        )
        return render(result)

    return router
