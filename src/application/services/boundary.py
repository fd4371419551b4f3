from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, TypeVar

from src.application.errors import ConflictError, InfrastructureError
from src.application.result import Result

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Result[Any]]])

GENERIC_FAILURE_MESSAGE = "The operation could not be completed, please try again later"


def _entity_label(kwargs: dict[str, Any]) -> str | None:
    entity = kwargs.get("entity") or kwargs.get("kind")
    if entity is None:
        return None
    return getattr(entity, "label", None) or getattr(entity, "value", None) or str(entity)


def _context(operation: str, kwargs: dict[str, Any]) -> dict[str, Any]:
    record_id = kwargs.get("record_id")
    return {
        "operation": operation,
        "entity": _entity_label(kwargs),
        "record_id": str(record_id) if record_id else None,
    }


def result_boundary(operation: str) -> Callable[[F], F]:
    """Turn persistence failures raised inside an operation into an error Result.

    The wrapped coroutine must take the unit of work as its first argument.
    A constraint violation the operation did not handle itself becomes a
    ``conflict`` error; any other persistence failure is logged, rolled back
    and reported as ``unexpected``.
    """

    def decorator(func: F) -> F:
        @wraps(func)
        async def wrapper(uow, *args: Any, **kwargs: Any) -> Result[Any]:
            try:
                return await func(uow, *args, **kwargs)
            except ConflictError as exc:
                logger.warning(
                    "Operation %s hit a constraint: %s",
                    operation,
                    exc.message,
                    extra=_context(operation, kwargs),
                )
                await uow.rollback()
                return Result.conflict("The change conflicts with stored data, nothing was applied")
            except InfrastructureError:
                logger.exception(
                    "Operation failed: %s", operation, extra=_context(operation, kwargs)
                )
                await uow.rollback()
                return Result.error(GENERIC_FAILURE_MESSAGE)

        return wrapper  # type: ignore[return-value]

    return decorator
