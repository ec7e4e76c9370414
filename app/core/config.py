"""
app/core/config.py

Purpose: Application configuration

- Loads environment variables
- Centralizes config values (database, SMS gateway credentials, CORS)
- Validates configuration on startup
- Environment-specific settings
"""

import logging
from typing import List, Literal, Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Validates all required configs on startup.
    """

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"

    # Database (MySQL in production)
    DATABASE_URL: Optional[str] = Field(
        default=None,
        description="Full SQLAlchemy URL; overrides the DB_* fields when set"
    )
    DB_HOST: Optional[str] = Field(
        default="localhost",
        description="Database host, without scheme"
    )
    DB_PORT: int = Field(default=3306, description="Database port")
    DB_USER: str = Field(default="root", description="Database user")
    DB_PASS: Optional[str] = Field(default=None, description="Database password")
    DB_NAME: str = Field(default="logozodev", description="Database name")
    DB_POOL_SIZE: int = Field(
        default=5,
        description="Maximum number of pooled database connections"
    )
    DB_POOL_TIMEOUT: int = Field(
        default=30,
        description="Seconds to wait for a free pooled connection"
    )

    # SMSlenz gateway
    SMS_USER_ID: Optional[str] = Field(default=None, description="SMSlenz account id")
    SMS_API_KEY: Optional[str] = Field(default=None, description="SMSlenz API key")
    SMS_SENDER_ID: Optional[str] = Field(default=None, description="SMSlenz sender id")
    SMS_API_URL: str = Field(
        default="https://smslenz.lk/api/send-sms",
        description="SMSlenz send endpoint"
    )

    # Application
    DEBUG: bool = Field(default=False, description="Enable debug mode")
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    API_PREFIX: str = Field(default="/api", description="API route prefix")
    CORS_ORIGINS: List[str] = Field(
        default=[
            "https://logozodev.com",
            "https://www.logozodev.com",
            "http://localhost:5173",
            "http://localhost:3000",
            "http://127.0.0.1:5500",
            "http://127.0.0.1:5501",
        ],
        description="Allowed CORS origins"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("DB_HOST")
    @classmethod
    def strip_host_scheme(cls, v):
        """Hosts are sometimes pasted with a scheme; the driver wants a bare host."""
        if v and "://" in v:
            v = v.split("://", 1)[1]
        return v.rstrip("/") if v else v

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def database_url(self) -> Union[str, URL]:
        """
        Effective SQLAlchemy URL.

        DATABASE_URL wins when present; otherwise a MySQL (PyMySQL) URL is
        assembled from the DB_* fields.
        """
        if self.DATABASE_URL:
            return make_url(self.DATABASE_URL)
        return URL.create(
            "mysql+pymysql",
            username=self.DB_USER,
            password=self.DB_PASS,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )

    @property
    def sms_configured(self) -> bool:
        """All three SMSlenz credentials are required to send."""
        return bool(self.SMS_USER_ID and self.SMS_API_KEY and self.SMS_SENDER_ID)


# Global settings instance
settings = Settings()


def validate_settings(config: Optional[Settings] = None):
    """
    Validates critical settings on application startup.
    Raises ValueError if any required setting is missing or invalid.
    """
    config = config or settings
    errors = []

    if not config.DATABASE_URL and not config.DB_HOST:
        errors.append("DATABASE_URL or DB_HOST is required")

    if config.DB_POOL_SIZE < 1:
        errors.append("DB_POOL_SIZE must be at least 1")

    if config.DB_POOL_TIMEOUT < 1:
        errors.append("DB_POOL_TIMEOUT must be at least 1")

    if errors:
        raise ValueError(f"Configuration validation failed: {', '.join(errors)}")

    if not config.sms_configured:
        logger.warning("SMS credentials incomplete; thank-you SMS will be skipped")

    return True
