from __future__ import annotations

from enum import Enum


class EconomicLevel(str, Enum):
    NONE = "Ninguno"
    LOW = "Bajo"
    LOWER_MIDDLE = "Medio Bajo"
    MIDDLE = "Medio"
    UPPER_MIDDLE = "Medio Alto"
    HIGH = "Alto"


DEFAULT_ECONOMIC_LEVEL = EconomicLevel.NONE
