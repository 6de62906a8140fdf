"""
Application settings using pydantic-settings for type-safe configuration.

All environment variables are centralized here with proper typing and
defaults. Credentials default to empty so that a missing credential is
reported as a configuration error on the request that needs it, rather
than preventing the public endpoints from starting.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from campreg.scoring.scorer import DEFAULT_MODEL, GEMINI_OPENAI_BASE_URL


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Production values should be set via environment variables or .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    # === Generative-text scoring ===
    gemini_api_key: str = Field(
        default="",
        description="API key for the generative-text scoring model",
    )
    ai_model: str = Field(
        default=DEFAULT_MODEL,
        description="Model used for applicant scoring",
    )
    ai_base_url: str = Field(
        default=GEMINI_OPENAI_BASE_URL,
        description="OpenAI-compatible API base URL for the scoring model",
    )
    ai_timeout: float = Field(
        default=30.0,
        description="Scoring request timeout in seconds",
    )

    # === UltraMsg (WhatsApp) ===
    ultramsg_instance_id: str = Field(
        default="",
        description="UltraMsg instance ID",
    )
    ultramsg_token: str = Field(
        default="",
        description="UltraMsg API token",
    )
    ultramsg_base_url: str = Field(
        default="https://api.ultramsg.com",
        description="UltraMsg API base URL",
    )
    messaging_timeout: float = Field(
        default=20.0,
        description="WhatsApp send timeout in seconds",
    )

    # === PocketBase (record store + identity provider) ===
    pocketbase_url: str = Field(
        default="http://127.0.0.1:8090",
        description="PocketBase server URL",
    )
    auth_collection: str = Field(
        default="users",
        description="PocketBase auth collection whose sessions are accepted",
    )
    registrations_collection: str = Field(
        default="registrations",
        description="PocketBase collection holding registrations",
    )
    pocketbase_admin_email: str = Field(
        default="admin@camp.local",
        description="PocketBase superuser email for server-side writes (public form, score write-back)",
    )
    pocketbase_admin_password: str = Field(
        default="",
        description="PocketBase superuser password",
    )
    skip_pb_auth: bool = Field(
        default=False,
        description="Skip PocketBase superuser authentication on startup (for testing)",
    )

    # === Authorization ===
    # Note: Use str type for env var parsing, convert to list via property
    admin_emails_str: str = Field(
        default="",
        alias="ADMIN_EMAILS",
        description="Admin email allow-list (comma-separated)",
    )

    # === CORS Configuration ===
    allowed_origins_str: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        alias="ALLOWED_ORIGINS",
        description="Allowed CORS origins (comma-separated)",
    )

    @property
    def admin_email_list(self) -> list[str]:
        """Parse comma-separated admin emails into a lower-cased list."""
        return [e.strip().lower() for e in self.admin_emails_str.split(",") if e.strip()]

    @property
    def allowed_origins(self) -> list[str]:
        """Parse comma-separated origins string into list."""
        return [origin.strip() for origin in self.allowed_origins_str.split(",") if origin.strip()]

    @field_validator("ai_timeout", "messaging_timeout", mode="after")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeouts must be positive")
        return v

    @field_validator("pocketbase_url", "ultramsg_base_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("pocketbase_admin_password", mode="after")
    @classmethod
    def validate_admin_password(cls, v: str) -> str:
        """Warn when the superuser password is unset or an obvious default."""
        if v in {"password", "admin", "123456", ""}:
            import logging

            logging.getLogger(__name__).warning(
                "SECURITY WARNING: POCKETBASE_ADMIN_PASSWORD is not set or uses an insecure default."
            )
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once and cached for the lifetime of the application.
    """
    return Settings()
