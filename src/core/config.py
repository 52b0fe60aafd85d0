"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from src.core.config import settings

    if settings.audit_enabled:
        ...

Environment variables (case-insensitive):
    ENVIRONMENT=production
    LOG_LEVEL=WARNING
    ROLE_RESOLVER=stored
    ADMIN_EMAIL_MARKERS='["admin@", "support@", "ops@"]'
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment


class RoleResolverKind(str, Enum):
    """Role derivation strategy selected at startup."""

    EMAIL_PATTERN = "email_pattern"
    STORED = "stored"


_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, detailed errors)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Access Guard",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    api_base_url: str = Field(
        default="https://api.example.com",
        description="API base URL, used to build Problem Details type URIs",
    )
    api_v1_prefix: str = Field(
        default="/api/v1",
        description="API v1 route prefix",
    )

    # Authorization
    audit_enabled: bool = Field(
        default=True,
        description="Record an audit event for every guard evaluation",
    )
    role_resolver: RoleResolverKind = Field(
        default=RoleResolverKind.EMAIL_PATTERN,
        description="Role derivation strategy (email_pattern, stored)",
    )
    super_admin_email_markers: list[str] = Field(
        default=["superadmin@", "root@"],
        description="Email substrings that resolve to super_admin",
    )
    admin_email_markers: list[str] = Field(
        default=["admin@", "support@"],
        description="Email substrings that resolve to admin",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @field_validator("super_admin_email_markers", "admin_email_markers")
    @classmethod
    def validate_markers(cls, v: list[str]) -> list[str]:
        """
        Lower-case markers and reject empty lists or blank markers.

        Raises:
            ValueError: If no usable marker is configured.
        """
        markers = [marker.strip().lower() for marker in v]
        if not markers or any(not marker for marker in markers):
            raise ValueError("email markers must be a non-empty list of non-blank strings")
        return markers

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
