from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import DECIMAL, DateTime, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from farmtrack.infrastructure.db.base import Base


class AccountSettingsORM(Base):
    __tablename__ = "account_settings"

    account_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    milk_price_per_liter: Mapped[Decimal] = mapped_column(DECIMAL(10, 2), nullable=False)
    currency: Mapped[str] = mapped_column(String(8), nullable=False, default="TRY")
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
