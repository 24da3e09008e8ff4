from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

from jose import ExpiredSignatureError, jwt
from jose.exceptions import JWTError

from farmtrack.application.errors import AuthError
from farmtrack.config.settings import Settings
from farmtrack.infrastructure.auth.context import AuthContext


@dataclass(slots=True)
class JWTService:
    """Turns bearer tokens from the hosted auth provider into an account context.

    Every token carries the account id as ``sub``; nothing else is trusted for
    scoping. ``issue`` mints tokens of the same shape for scripts and tests.
    """

    secret_key: str
    algorithm: str = "HS256"
    lifetime: timedelta = timedelta(minutes=60)
    issuer: str | None = None
    audience: str | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> JWTService:
        return cls(
            secret_key=settings.jwt_secret_key.get_secret_value(),
            algorithm=settings.jwt_algorithm,
            lifetime=timedelta(minutes=settings.jwt_access_token_expires_minutes),
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
        )

    def issue(self, account_id: UUID, *, email: str | None = None) -> str:
        issued_at = datetime.now(timezone.utc)
        claims: dict[str, Any] = {
            "sub": str(account_id),
            "iat": issued_at,
            "exp": issued_at + self.lifetime,
        }
        if email:
            claims["email"] = email
        if self.issuer:
            claims["iss"] = self.issuer
        if self.audience:
            claims["aud"] = self.audience
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def authenticate(self, token: str) -> AuthContext:
        try:
            claims = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                audience=self.audience,
                options={"verify_aud": self.audience is not None},
            )
        except ExpiredSignatureError as exc:
            raise AuthError("Token has expired") from exc
        except JWTError as exc:
            raise AuthError("Token validation failed") from exc

        try:
            account_id = UUID(str(claims["sub"]))
        except (KeyError, ValueError) as exc:
            raise AuthError("Token subject is not an account id") from exc
        return AuthContext(account_id=account_id, claims=claims)
