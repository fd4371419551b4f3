"""Uniform return value for core operations.

Expected business outcomes (not found, duplicate, forbidden, wrong lifecycle
state) are reported through :class:`Result` instead of raising. Callers branch
on ``kind`` (and ``reason`` when they need the finer distinction), never on
the message text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ResultKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INVALID = "invalid"
    UNAUTHORIZED = "unauthorized"


class FailureReason(str, Enum):
    NOT_FOUND = "not_found"
    DUPLICATE = "duplicate"
    FORBIDDEN = "forbidden"
    INVALID_STATE = "invalid_state"
    CONFLICT = "conflict"
    INVALID_REFERENCE = "invalid_reference"
    INVALID_INPUT = "invalid_input"
    NOTHING_TO_UPDATE = "nothing_to_update"
    UNEXPECTED = "unexpected"


@dataclass(slots=True, frozen=True)
class Result(Generic[T]):
    kind: ResultKind
    message: str
    data: T | None = None
    reason: FailureReason | None = None

    @classmethod
    def success(cls, message: str, data: T | None = None) -> Result[T]:
        return cls(kind=ResultKind.SUCCESS, message=message, data=data)

    @classmethod
    def warning(cls, message: str, data: T | None = None) -> Result[T]:
        return cls(kind=ResultKind.WARNING, message=message, data=data)

    @classmethod
    def error(cls, message: str, reason: FailureReason = FailureReason.UNEXPECTED) -> Result[T]:
        return cls(kind=ResultKind.ERROR, message=message, reason=reason)

    @classmethod
    def not_found(cls, message: str) -> Result[T]:
        return cls.error(message, FailureReason.NOT_FOUND)

    @classmethod
    def duplicate(cls, message: str) -> Result[T]:
        return cls.error(message, FailureReason.DUPLICATE)

    @classmethod
    def invalid_state(cls, message: str) -> Result[T]:
        return cls.error(message, FailureReason.INVALID_STATE)

    @classmethod
    def conflict(cls, message: str) -> Result[T]:
        return cls.error(message, FailureReason.CONFLICT)

    @classmethod
    def invalid(
        cls, message: str, reason: FailureReason = FailureReason.INVALID_INPUT
    ) -> Result[T]:
        return cls(kind=ResultKind.INVALID, message=message, reason=reason)

    @classmethod
    def unauthorized(cls, message: str) -> Result[T]:
        return cls(kind=ResultKind.UNAUTHORIZED, message=message, reason=FailureReason.FORBIDDEN)

    @property
    def ok(self) -> bool:
        return self.kind in {ResultKind.SUCCESS, ResultKind.WARNING}

    def __bool__(self) -> bool:
        return self.ok

    def as_payload(self, data: Any = None) -> dict[str, Any]:
        payload: dict[str, Any] = {"type": self.kind.value, "message": self.message}
        if self.reason is not None:
            payload["code"] = self.reason.value
        if data is not None:
            payload["data"] = data
        return payload
