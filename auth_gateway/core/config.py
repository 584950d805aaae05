"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from auth_gateway.core.config import settings

    api_key = settings.identity_toolkit_api_key

    if settings.is_development:
        # Dev-specific behavior
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from auth_gateway.core.constants import (
    IDENTITY_TOOLKIT_BASE_URL,
    PROVIDER_TIMEOUT_DEFAULT,
    TEMPORARY_AUTHENTICATION_CONTEXT_PREFIX,
)
from auth_gateway.core.enums import Environment

LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
AUTHENTICATION_BACKENDS = frozenset({"identity_toolkit", "fake"})


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values (only for non-sensitive config)
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="auth-gateway",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # Authentication gateway
    authentication_backend: str = Field(
        default="identity_toolkit",
        description="Gateway implementation: 'identity_toolkit' (live) or 'fake'",
    )
    identity_toolkit_api_key: str | None = Field(
        default=None,
        description="Web API key of the identity provider project (required by the live backend)",
    )
    identity_toolkit_base_url: str = Field(
        default=IDENTITY_TOOLKIT_BASE_URL,
        description="Identity Toolkit REST base URL (override for the local emulator)",
    )
    provider_timeout: float = Field(
        default=PROVIDER_TIMEOUT_DEFAULT,
        description="HTTP timeout for identity provider calls in seconds",
    )
    temporary_context_prefix: str = Field(
        default=TEMPORARY_AUTHENTICATION_CONTEXT_PREFIX,
        description="Name prefix for isolated provider contexts created by signup",
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

        Args:
            v: Log level name (any case).

        Returns:
            str: Upper-cased log level.

        Raises:
            ValueError: If the level is not one of the five standard levels.
        """
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(LOG_LEVELS)}")
        return level

    @field_validator("authentication_backend")
    @classmethod
    def validate_authentication_backend(cls, v: str) -> str:
        """Validate the gateway backend name."""
        backend = v.lower()
        if backend not in AUTHENTICATION_BACKENDS:
            raise ValueError(
                f"authentication_backend must be one of {sorted(AUTHENTICATION_BACKENDS)}"
            )
        return backend

    @field_validator("identity_toolkit_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Remove trailing slashes from URLs."""
        return v.rstrip("/")

    @field_validator("provider_timeout")
    @classmethod
    def validate_provider_timeout(cls, v: float) -> float:
        """Validate the provider timeout is positive."""
        if v <= 0:
            raise ValueError("provider_timeout must be greater than 0")
        return v

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing environment.

        Returns:
            bool: True if environment is TESTING, False otherwise.
        """
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """
        Check if running in CI environment.

        Returns:
            bool: True if environment is CI, False otherwise.
        """
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
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
