from __future__ import annotations

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.result import Result
from src.application.services.boundary import result_boundary
from src.domain.models.economic_status import EconomicStatus
from src.domain.value_objects.economic_level import EconomicLevel

_ORDER = {level.value: index for index, level in enumerate(EconomicLevel)}


@result_boundary("find_all_economic_statuses")
async def execute(uow: UnitOfWork) -> Result[list[EconomicStatus]]:
    items = await uow.economic_statuses.find_many_by(deleted=False)
    if not items:
        return Result.warning("No economic statuses configured", [])
    items.sort(key=lambda status: _ORDER.get(status.level, len(_ORDER)))
    return Result.success("Economic statuses found", items)
