from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID

DEFAULT_MILK_PRICE_PER_LITER = Decimal("30")


@dataclass(slots=True)
class AccountSettings:
    account_id: UUID
    milk_price_per_liter: Decimal = DEFAULT_MILK_PRICE_PER_LITER
    currency: str = "TRY"
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
