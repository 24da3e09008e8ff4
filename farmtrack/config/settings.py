from __future__ import annotations

from decimal import Decimal
from functools import lru_cache

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str
    log_level: str = "INFO"
    environment: str = "dev"
    # Tokens are issued by the hosted auth service; we only verify them
    jwt_secret_key: SecretStr
    jwt_algorithm: str = "HS256"
    jwt_access_token_expires_minutes: int = 60
    jwt_issuer: str | None = None
    jwt_audience: str | None = None
    # CORS
    cors_allow_origins: str = "*"
    # Farm-local calendar used for "today", month windows and digests
    timezone: str = "Europe/Istanbul"
    # Email
    email_provider: str = "logging"  # logging | resend
    email_from_name: str = "FarmTrack"
    email_from_address: str = "onboarding@farmtrack.local"
    email_default_locale: str = "en"
    email_primary_color: str = "#16a34a"
    app_url: str | None = None
    resend_api_key: SecretStr | None = None
    resend_api_url: str = "https://api.resend.com/emails"
    # WhatsApp (Twilio)
    twilio_account_sid: str | None = None
    twilio_auth_token: SecretStr | None = None
    twilio_whatsapp_from: str | None = None
    twilio_api_base: str = "https://api.twilio.com/2010-04-01"
    whatsapp_default_country_code: str = "90"
    # Shared secret for the scheduler hitting the daily digest endpoint
    cron_secret_key: SecretStr | None = None
    # Business defaults
    default_milk_price_per_liter: Decimal = Decimal("30")
    daily_upcoming_vaccination_days: int = 7
    daily_upcoming_birth_days: int = 14

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("database_url")
    @classmethod
    def ensure_asyncpg_scheme(cls, value: str) -> str:
        if value.startswith("postgres://"):
            return value.replace("postgres://", "postgresql+asyncpg://", 1)
        if value.startswith("postgresql://") and "+" not in value.split("://", 1)[0]:
            return value.replace("postgresql://", "postgresql+asyncpg://", 1)
        return value

    @property
    def cors_allow_origins_list(self) -> list[str]:
        """Convert cors_allow_origins string to list"""
        if isinstance(self.cors_allow_origins, str):
            return [v.strip() for v in self.cors_allow_origins.split(",") if v.strip()]
        return self.cors_allow_origins

    @property
    def twilio_configured(self) -> bool:
        return bool(self.twilio_account_sid and self.twilio_auth_token and self.twilio_whatsapp_from)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
