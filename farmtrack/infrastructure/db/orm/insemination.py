from __future__ import annotations

from datetime import date as DtDate
from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, Index, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from farmtrack.infrastructure.db.base import Base


class InseminationORM(Base):
    __tablename__ = "inseminations"
    __table_args__ = (
        Index("ix_inseminations_account_animal_date", "account_id", "animal_id", "date"),
        Index("ix_inseminations_account_pregnant", "account_id", "is_pregnant"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    account_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False)
    animal_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("animals.id", ondelete="CASCADE"), nullable=False
    )
    date: Mapped[DtDate] = mapped_column(Date, nullable=False)
    method: Mapped[str] = mapped_column(String(16), nullable=False)
    expected_birth_date: Mapped[DtDate] = mapped_column(Date, nullable=False)
    actual_birth_date: Mapped[DtDate | None] = mapped_column(Date, nullable=True)
    is_pregnant: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
    version: Mapped[int] = mapped_column(nullable=False, default=1)
