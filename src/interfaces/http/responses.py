"""Rendering of operation Results as HTTP responses."""

from __future__ import annotations

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette import status

from src.application.pagination import Page
from src.application.result import FailureReason, Result, ResultKind
from src.application.services.lifecycle import ToggleOutcome

_ERROR_STATUS: dict[FailureReason | None, int] = {
    FailureReason.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    FailureReason.DUPLICATE: status.HTTP_409_CONFLICT,
    FailureReason.INVALID_STATE: status.HTTP_409_CONFLICT,
    FailureReason.CONFLICT: status.HTTP_409_CONFLICT,
}


def status_for(result: Result[Any], *, created: bool = False) -> int:
    if result.kind is ResultKind.SUCCESS:
        return status.HTTP_201_CREATED if created else status.HTTP_200_OK
    if result.kind is ResultKind.WARNING:
        return status.HTTP_200_OK
    if result.kind is ResultKind.INVALID:
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    if result.kind is ResultKind.UNAUTHORIZED:
        return status.HTTP_403_FORBIDDEN
    return _ERROR_STATUS.get(result.reason, status.HTTP_500_INTERNAL_SERVER_ERROR)


def _dump(item: Any, schema: type[BaseModel] | None) -> Any:
    if schema is None:
        return jsonable_encoder(item)
    return schema.model_validate(item).model_dump(mode="json")


def serialize(data: Any, schema: type[BaseModel] | None = None) -> Any:
    if data is None:
        return None
    if isinstance(data, Page):
        return {
            "items": [_dump(item, schema) for item in data.items],
            "current_page": data.current_page,
            "page_size": data.page_size,
            "total_count": data.total_count,
            "total_pages": data.total_pages,
        }
    if isinstance(data, ToggleOutcome):
        payload: dict[str, Any] = {
            "id": str(data.record_id),
            "entity": data.kind.value,
            "deleted": data.deleted,
        }
        if data.linked is not None:
            payload["linked"] = {"entity": data.linked.kind.value, "id": str(data.linked.record_id)}
        return payload
    if isinstance(data, list):
        return [_dump(item, schema) for item in data]
    if isinstance(data, (bool, int, str)):
        return data
    return _dump(data, schema)


def render(
    result: Result[Any], schema: type[BaseModel] | None = None, *, created: bool = False
) -> JSONResponse:
    data = serialize(result.data, schema) if result.ok else None
    return JSONResponse(
        status_code=status_for(result, created=created), content=result.as_payload(data)
    )
