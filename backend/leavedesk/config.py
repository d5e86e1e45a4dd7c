from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "LeaveDesk"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"
    database_url: str = "postgresql+asyncpg://leavedesk:leavedesk@db:5432/leavedesk"
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8000"]

    # Auth
    secret_key: str = "change-me"
    access_token_expire_minutes: int = 60 * 24
    password_reset_ttl_minutes: int = 60

    # Public URL used in e-mails, notification links and document QR codes.
    app_base_url: str = "http://localhost:3000"

    # Leave categories whose approval decrements the matching balance counter.
    deductible_leave_types: list[str] = ["ANNUAL", "SICK"]

    # Mail
    smtp_host: str = "localhost"
    smtp_port: int = 465
    smtp_username: str | None = None
    smtp_password: str | None = None
    smtp_use_ssl: bool = True
    mail_from: str = "HR Department <no-reply@leavedesk.local>"


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return cached settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
