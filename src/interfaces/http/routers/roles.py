from __future__ import annotations

from fastapi import APIRouter

from src.application.catalog import ROLES
from src.interfaces.http.deps import ADMIN_ONLY
from src.interfaces.http.routers.catalog import register_catalog_routes
from src.interfaces.http.schemas.roles import RoleCreate, RoleResponse, RoleUpdate

# Role management is an administrator concern end to end
router = APIRouter(prefix="/roles", tags=["roles"])

register_catalog_routes(
    router,
    ROLES,
    create_schema=RoleCreate,
    update_schema=RoleUpdate,
    response_schema=RoleResponse,
    read_roles=ADMIN_ONLY,
    write_roles=ADMIN_ONLY,
)
