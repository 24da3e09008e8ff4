from __future__ import annotations

from datetime import date as DtDate
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import (
    DECIMAL,
    Date,
    DateTime,
    ForeignKey,
    String,
    Text,
    UniqueConstraint,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from farmtrack.infrastructure.db.base import Base


class MilkProductionORM(Base):
    __tablename__ = "milk_productions"
    __table_args__ = (
        UniqueConstraint(
            "account_id", "animal_id", "date", name="ux_milk_productions_account_animal_date"
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    account_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), index=True, nullable=False)
    animal_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("animals.id", ondelete="CASCADE"), nullable=False
    )
    date: Mapped[DtDate] = mapped_column(Date, nullable=False, index=True)
    morning_amount: Mapped[Decimal] = mapped_column(DECIMAL(10, 2), nullable=False, default=0)
    evening_amount: Mapped[Decimal] = mapped_column(DECIMAL(10, 2), nullable=False, default=0)
    total_amount: Mapped[Decimal] = mapped_column(DECIMAL(10, 2), nullable=False)
    quality: Mapped[str | None] = mapped_column(String(16), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
    version: Mapped[int] = mapped_column(nullable=False, default=1)
