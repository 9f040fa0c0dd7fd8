"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

DEFAULT_NOTIFICATION_EXPIRATION_SECONDS = 86400 * 30


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./pushgate.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    app_timezone: str | None = Field(
        default=None,
        description="IANA timezone name (or UTC offset) used for persisted timestamps",
    )
    apns_host: str = Field(
        default="gateway.sandbox.push.apple.com",
        description="Host name of the binary push gateway",
        min_length=1,
    )
    apns_port: int = Field(
        default=2195, description="TCP port of the binary push gateway", gt=0
    )
    apns_cert_path: str | None = Field(
        default=None,
        description="PEM certificate presented to the gateway during the TLS handshake",
    )
    apns_key_path: str | None = Field(
        default=None,
        description="Private key for the certificate; may be omitted when bundled in the PEM",
    )
    apns_key_password: str | None = Field(
        default=None, description="Passphrase protecting the private key"
    )
    apns_notification_expiration_seconds: int = Field(
        default=DEFAULT_NOTIFICATION_EXPIRATION_SECONDS,
        description="Seconds the gateway keeps trying to deliver an enhanced frame",
        gt=0,
    )
    apns_response_timeout_seconds: float = Field(
        default=5,
        description="Seconds to wait for an error response after a broken write",
        ge=0,
    )
    apns_connect_timeout_seconds: float = Field(
        default=30,
        description="Seconds allowed for the TCP connect and TLS handshake",
        gt=0,
    )

    @model_validator(mode="after")
    def _validate_key_requires_cert(self) -> "Settings":
        if self.apns_key_path and not self.apns_cert_path:
            raise ValueError(
                "APNS_KEY_PATH requires APNS_CERT_PATH to be configured as well"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = [
    "DEFAULT_NOTIFICATION_EXPIRATION_SECONDS",
    "Settings",
    "get_settings",
    "reset_settings_cache",
]
