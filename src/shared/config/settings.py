"""Configuration management with Pydantic Settings.

Environment variables are loaded from:
1. Environment variables (highest priority)
2. .env file (development)
3. Defaults (lowest priority)
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Deployment environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Logging level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Logging format."""

    JSON = "json"
    TEXT = "text"


class DatabaseSettings(BaseSettings):
    """PostgreSQL database configuration."""

    model_config = SettingsConfigDict(env_prefix="POSTGRES_")

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    user: str = Field(default="rbac", description="Database user")
    password: str = Field(default="", description="Database password")
    database: str = Field(default="rbac", description="Database name")

    @property
    def async_url(self) -> str:
        """Build async database URL (asyncpg driver)."""
        return f"postgresql+asyncpg://{self.user}:{self.password}@{self.host}:{self.port}/{self.database}"


class AuditSettings(BaseSettings):
    """Audit sink configuration.

    When ``enabled`` is false no audit record leaves the process.
    """

    model_config = SettingsConfigDict(env_prefix="AUDIT_")

    enabled: bool = Field(default=False, description="Forward mutations to the audit service")
    url: str = Field(default="http://audit:8080/api/v1/audit", description="Audit service endpoint")
    api_key: str = Field(default="", description="API key presented to the audit service")
    timeout_seconds: float = Field(default=10.0, description="Audit request timeout")


class Settings(BaseSettings):
    """Main application settings.

    All settings can be overridden via environment variables.
    For nested settings, use the appropriate prefix (e.g., POSTGRES_HOST).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="rbac-registry", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        alias="ENV",
        description="Deployment environment",
    )

    # Logging configuration
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")
    log_format: LogFormat = Field(default=LogFormat.JSON, description="Logging format")

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Server bind host")
    port: int = Field(default=8080, description="Server bind port")
    debug: bool = Field(default=False, description="Enable debug mode")

    # Nested settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses LRU cache to avoid re-parsing environment variables.
    """
    return Settings()


class RbacRegistrySettings(Settings):
    """Settings specific to the RBAC registry service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    service_name: str = Field(
        default="rbac-registry",
        description="Source name reported in audit records",
    )
    rbac_api_key: str = Field(
        default="",
        description="Shared secret expected in the x-api-key header",
    )
    default_page_size: int = Field(
        default=10,
        ge=1,
        description="Page size used when the query omits pageSize",
    )
    max_page_size: int = Field(
        default=100,
        ge=1,
        description="Largest page size a client may request",
    )

    audit: AuditSettings = Field(default_factory=AuditSettings)
