"""Application configuration."""
from functools import lru_cache
from typing import Literal
from urllib.parse import quote_plus

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)

    # App
    APP_NAME: str = "Storefront Backend"
    # "test" switches the pool (and migrations) over to POSTGRES_DB_TEST.
    ENV: str = "dev"
    LOG_LEVEL: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"
    ALLOWED_ORIGINS: str = "http://localhost:3000"

    # Database
    POSTGRES_HOST: str = "127.0.0.1"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "storefront_dev"
    POSTGRES_DB_TEST: str = "storefront_test"
    POSTGRES_USER: str = "storefront_user"
    POSTGRES_PASSWORD: str = "password123"
    DATABASE_POOL_SIZE: int = 10
    DATABASE_MAX_OVERFLOW: int = 5

    # JWT
    TOKEN_SECRET: str
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    JWT_LEEWAY_SECONDS: int = 30  # clock skew tolerance for exp validation
    # Pre-issued bearer token for manual calls against a running server.
    TOKEN: str | None = None

    # Password hashing
    BCRYPT_PASSWORD: str
    SALT_ROUNDS: int = Field(default=10, ge=4, le=31)

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.strip().upper() if isinstance(value, str) else value

    @property
    def is_test(self) -> bool:
        return self.ENV.lower() == "test"

    @property
    def is_production(self) -> bool:
        return self.ENV.lower() == "production"

    @property
    def database_name(self) -> str:
        """Database the pool connects to for the current ENV."""
        return self.POSTGRES_DB_TEST if self.is_test else self.POSTGRES_DB

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL for the current ENV."""
        return (
            f"postgresql+psycopg2://{quote_plus(self.POSTGRES_USER)}:{quote_plus(self.POSTGRES_PASSWORD)}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.database_name}"
        )

    @property
    def cors_origins(self) -> list[str]:
        """Get CORS origins as list."""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
