"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import Field, MongoDsn, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from authkit.core.constants import DEFAULT_INSECURE_SECRET, MIN_SECRET_KEY_LENGTH


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "authkit"
    debug: bool = False
    environment: str = "development"  # development, staging, production
    secret_key: str = DEFAULT_INSECURE_SECRET

    # Database
    mongodb_url: MongoDsn = MongoDsn("mongodb://localhost:27017")
    mongodb_database: str = "authkit"

    # CORS
    cors_origins: list[str] = []

    # API Documentation
    api_docs_base_url: str = "https://api.example.com"

    # Auth
    jwt_algorithm: str = "HS256"
    jwt_access_expiration_minutes: int = Field(default=30, ge=1)
    jwt_refresh_expiration_days: int = Field(default=30, ge=1)
    jwt_reset_password_expiration_minutes: int = Field(default=10, ge=1)
    jwt_verify_email_expiration_minutes: int = Field(default=10, ge=1)

    # Observability
    log_level: str = "INFO"

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        """Reject short secrets, allowing the development default.

        The default itself is refused at runtime by ``is_production``.

        Raises:
            ValueError: If the secret key is too short
        """
        if v != DEFAULT_INSECURE_SECRET and len(v) < MIN_SECRET_KEY_LENGTH:
            raise ValueError(
                f"SECRET_KEY must be at least {MIN_SECRET_KEY_LENGTH} characters. "
                "Generate one with: python -c 'import secrets; print(secrets.token_urlsafe(32))'"
            )
        return v

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment.

        Raises:
            ValueError: If using insecure secret key in production
        """
        is_prod = self.environment == "production"
        if is_prod and self.secret_key == DEFAULT_INSECURE_SECRET:
            raise ValueError(
                "SECRET_KEY must be set to a secure value in production. "
                "Generate one with: python -c 'import secrets; print(secrets.token_urlsafe(32))'"
            )
        return is_prod

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
