"""Application error taxonomy.

Every error carries a machine ``code`` and the HTTP status the error handler
answers with; ``details`` ends up verbatim in the JSON body.
"""

from __future__ import annotations

from typing import Any, Mapping
from uuid import UUID


class AppError(Exception):
    code = "app_error"
    status_code = 400

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class AuthError(AppError):
    code = "auth_error"
    status_code = 401


class PermissionDenied(AppError):
    code = "forbidden"
    status_code = 403


class NotFound(AppError):
    code = "not_found"
    status_code = 404


class ValidationError(AppError):
    code = "validation_error"
    status_code = 422


class ConflictError(AppError):
    """Duplicate natural keys and transitions out of a terminal state."""

    code = "conflict"
    status_code = 409


class StaleVersionError(ConflictError):
    code = "version_conflict"

    def __init__(self, entity: str, entity_id: UUID, expected_version: int) -> None:
        super().__init__(
            f"The {entity} was modified by someone else; reload it and retry",
            details={"id": str(entity_id), "expected_version": expected_version},
        )


class InfrastructureError(AppError):
    code = "infrastructure_error"
    status_code = 500


class NotificationDeliveryError(AppError):
    """Raised by the email and WhatsApp gateways.

    ``provider_error`` keeps the provider's raw answer so it can be stored on
    the failed notification log entry.
    """

    code = "notification_failed"
    status_code = 502

    def __init__(
        self,
        message: str,
        *,
        provider_error: Any = None,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)
        self.provider_error = provider_error
