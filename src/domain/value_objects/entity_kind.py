from __future__ import annotations

from enum import Enum


class EntityKind(str, Enum):
    ROLE = "role"
    USER = "user"
    CLIENT = "client"
    ECONOMIC_STATUS = "economic_status"
    SPECIES = "species"
    BREED = "breed"
    DISEASE = "disease"
    PERSONALITY = "personality"
    CHARACTERISTIC = "characteristic"
    ANIMAL = "animal"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ")


class KeyType(str, Enum):
    # Column used to address a record: its own primary key or the owning user.
    ID = "id"
    OWNER = "owner"
