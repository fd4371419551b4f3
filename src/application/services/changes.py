from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from src.application.result import FailureReason, Result


def cleared_fields(changes: Mapping[str, Any], required: Iterable[str]) -> list[str]:
    """Required fields that the payload explicitly sets to ``None``."""
    return sorted(name for name in required if name in changes and changes[name] is None)


def reject_cleared(changes: Mapping[str, Any], required: Iterable[str]) -> Result[Any] | None:
    cleared = cleared_fields(changes, required)
    if cleared:
        return Result.invalid(
            f"These fields cannot be set to null: {', '.join(cleared)}",
            FailureReason.INVALID_INPUT,
        )
    return None
