"""Application configuration via environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Central configuration for the application skeleton."""

    # Application
    app_name: str = "Skeleton"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = Field(
        default="local",
        pattern=r"^(local|development|staging|production|testing)$",
    )
    log_level: str = "INFO"
    log_format: str = "json"

    # API
    allowed_origins: str = "http://localhost:3000"
    rate_limit_default: str = "100/minute"

    # Database
    database_url: str = "sqlite:///database/database.sqlite"

    # Storage
    storage_path: str = "storage"

    # Mail (defaults point at a local Mailhog)
    mail_host: str = "localhost"
    mail_port: int = 1025
    mail_username: str = ""
    mail_password: str = ""
    mail_encryption: str = Field(default="none", pattern=r"^(none|tls)$")
    mail_timeout: float = 10.0
    mail_from_address: str = "hello@example.com"
    mail_from_name: str = "Skeleton"
    mail_ui_url: str = "http://localhost:8025"

    @property
    def allowed_origins_list(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",")]

    model_config = {"env_prefix": "SKELETON_", "env_file": ".env", "extra": "ignore"}


def get_settings() -> Settings:
    """Return a settings instance built from the environment."""
    return Settings()
