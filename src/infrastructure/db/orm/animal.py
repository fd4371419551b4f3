from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import JSON, Boolean, Date, DateTime, ForeignKey, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class AnimalORM(Base):
    __tablename__ = "animals"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    species_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("species.id"), nullable=False, index=True
    )
    breed_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("breeds.id"), nullable=False, index=True
    )
    disease_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("diseases.id"), nullable=True
    )
    characteristic_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("characteristics.id"), nullable=True
    )
    health_status: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    entry_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    adopted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    # Plain JSON list so the table also works on SQLite in tests
    photos: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    information: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
