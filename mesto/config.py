"""Configuration management for the application."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "change-me-in-production"  # noqa: S105
DEVELOPMENT_JWT_SECRET = "dev-secret"  # noqa: S105


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Frozen after construction: the signing secret and everything else here is
    process-wide, read-only state shared by every request.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", frozen=True
    )

    # Database
    database_url: str = Field(default="sqlite:///./mesto.db")

    # JWT
    jwt_secret: str = Field(default=DEFAULT_JWT_SECRET)
    jwt_algorithm: str = Field(default="HS256")
    jwt_expiration_minutes: int = Field(default=10080)  # 7 days

    # API
    environment: str = Field(default="development")
    host: str = Field(default="0.0.0.0")  # noqa: S104
    port: int = Field(default=3000)
    log_level: str = Field(default="INFO")
    cors_origins: list[str] = Field(
        default=[
            "https://mesto.moscow89er.frontend.nomoreparties.sbs",
            "http://mesto.moscow89er.frontend.nomoreparties.sbs",
            "http://localhost:3000",
        ]
    )

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has secure settings."""
        if self.environment == "production":
            if self.jwt_secret == DEFAULT_JWT_SECRET:
                raise ValueError("JWT_SECRET must be changed in production")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def signing_secret(self) -> str:
        """Secret used to sign and verify bearer tokens."""
        return self.jwt_secret if self.is_production else DEVELOPMENT_JWT_SECRET


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
