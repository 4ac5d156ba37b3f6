"""
ClassHub Backend - Application Configuration
=============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time.

Store connection:
    The store is described by the classic DB_HOST / DB_USER / DB_PASSWORD /
    DB_NAME / DB_PORT variables. DATABASE_URL, when set, replaces all of
    them (used for SQLite in development and tests).

    TLS toward the store is on by default with certificate verification
    switched off (DB_SSL_VERIFY=false), matching managed MySQL hosts that
    present self-signed certificates.
"""

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL, make_url

# Shorter tokens leave the reset endpoint disabled
ADMIN_TOKEN_MIN_LENGTH = 16


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern. Field names map case-insensitively
    onto environment variables (db_host <- DB_HOST).
    """

    # ── Database ──────────────────────────────────────────────────────────
    db_host: str = Field(default="localhost")
    db_user: str = Field(default="root")
    db_password: str = Field(default="")
    db_name: str = Field(default="classhub")
    db_port: int = Field(default=3306, ge=1, le=65535)

    # Async SQLAlchemy dialect+driver used when building the URL from parts
    # Examples: mysql+aiomysql, postgresql+asyncpg
    db_driver: str = Field(default="mysql+aiomysql")

    # Full URL override, e.g. sqlite+aiosqlite:///./classhub.db
    database_url: Optional[str] = Field(default=None)

    db_ssl: bool = Field(default=True)
    db_ssl_verify: bool = Field(default=False)

    db_pool_size: int = Field(default=10, ge=1, le=100)
    db_max_overflow: int = Field(default=5, ge=0, le=50)
    db_pool_pre_ping: bool = Field(default=True)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Comma-separated list; "*" allows any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)

    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Administration ────────────────────────────────────────────────────
    # The destructive reset endpoint stays disabled while this is empty or
    # shorter than ADMIN_TOKEN_MIN_LENGTH
    admin_token: str = Field(default="")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @property
    def admin_token_usable(self) -> bool:
        return len(self.admin_token) >= ADMIN_TOKEN_MIN_LENGTH

    @property
    def sqlalchemy_url(self) -> URL:
        """The store URL, either the DATABASE_URL override or built from parts."""
        if self.database_url:
            return make_url(self.database_url)
        return URL.create(
            drivername=self.db_driver,
            username=self.db_user or None,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )

    def validate_required_for_production(self) -> None:
        """
        What:  Validates that the store connection is configured.
        When:  Called during app startup (lifespan).
        How:   Collects every problem and raises a single ValueError.
        """
        errors = []
        if not self.database_url:
            if not self.db_host:
                errors.append("DB_HOST is not set.")
            if not self.db_name:
                errors.append("DB_NAME is not set.")
        if self.admin_token and not self.admin_token_usable:
            errors.append(
                f"ADMIN_TOKEN is shorter than {ADMIN_TOKEN_MIN_LENGTH} characters; "
                "the reset endpoint stays disabled."
            )
        if errors:
            raise ValueError(
                "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            )


# Singleton instance, imported throughout the application
settings = Settings()
