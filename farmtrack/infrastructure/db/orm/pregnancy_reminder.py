from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, Index, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from farmtrack.infrastructure.db.base import Base


class PregnancyReminderORM(Base):
    __tablename__ = "pregnancy_reminders"
    __table_args__ = (
        Index("ix_pregnancy_reminders_account_sent_date", "account_id", "is_sent", "reminder_date"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    account_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False)
    insemination_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("inseminations.id", ondelete="CASCADE"), nullable=False
    )
    reminder_type: Mapped[str] = mapped_column(String(16), nullable=False)
    reminder_date: Mapped[date] = mapped_column(Date, nullable=False)
    is_sent: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
