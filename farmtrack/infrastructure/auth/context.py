from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from farmtrack.application.errors import PermissionDenied


@dataclass(slots=True)
class AuthContext:
    account_id: UUID
    claims: dict[str, Any] = field(default_factory=dict)

    @property
    def email(self) -> str | None:
        value = self.claims.get("email")
        return str(value) if value else None

    def require_account(self, user_id: UUID) -> None:
        """Reject requests that act on behalf of a different account."""
        if user_id != self.account_id:
            raise PermissionDenied("Cannot act on behalf of another account")
