"""
API Configuration Management

Provides centralized configuration handling with environment-aware settings
and validation for the send-guard HTTP service.

Design Considerations:
- Environment-specific configuration profiles
- Default values with proper documentation
- Detection policy (internal domain, risky extensions) stays compiled-in;
  only deployment details such as the dialog location are configurable
"""

from enum import Enum
from functools import lru_cache
from typing import List, Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from send_guard.config.guard_config import DEFAULT_GUARD_CONFIG, GuardConfig


class EnvironmentType(str, Enum):
    """Valid environment types for configuration context."""
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


class APISettings(BaseSettings):
    """
    API configuration settings with environment-specific defaults and validation.

    Values are read from the process environment and an optional .env file.
    """
    # Environment Configuration
    ENVIRONMENT: EnvironmentType = Field(
        default=EnvironmentType.DEVELOPMENT,
        description="Runtime environment context"
    )
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )

    # API Settings
    API_TITLE: str = Field(
        default="Send Guard API",
        description="API title for documentation"
    )
    API_DESCRIPTION: str = Field(
        default="Send-time screening of outgoing email for PHI indicators, external links and risky attachments",
        description="API description for documentation"
    )
    API_VERSION: str = Field(
        default="1.0.0",
        description="API version"
    )

    # CORS Settings
    CORS_ORIGINS: Union[str, List[str]] = Field(
        default="*",
        description="Comma-separated list of allowed origins for CORS"
    )
    CORS_METHODS: Union[str, List[str]] = Field(
        default="GET,POST,OPTIONS",
        description="Comma-separated list of allowed methods for CORS"
    )

    # Confirmation dialog
    DIALOG_BASE_URL: str = Field(
        default=DEFAULT_GUARD_CONFIG.dialog_base_url,
        description="Base URL the confirmation page is served from"
    )
    CONFIRMATION_TIMEOUT_SECONDS: Optional[float] = Field(
        default=None,
        gt=0,
        description="Optional wait limit for a verdict; unset waits indefinitely"
    )

    @field_validator("CORS_ORIGINS")
    @classmethod
    def parse_cors_origins(cls, value: Union[str, List[str]]) -> List[str]:
        """Parse comma-separated CORS origins into list."""
        if isinstance(value, list):
            return value
        if value == "*":
            return ["*"]
        return [origin.strip() for origin in value.split(",") if origin.strip()]

    @field_validator("CORS_METHODS")
    @classmethod
    def parse_cors_methods(cls, value: Union[str, List[str]]) -> List[str]:
        """Parse comma-separated CORS methods into list."""
        if isinstance(value, list):
            return value
        return [method.strip() for method in value.split(",") if method.strip()]

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unsupported log level: {value}")
        return level

    def to_guard_config(self) -> GuardConfig:
        """Build the guard configuration for this deployment."""
        return DEFAULT_GUARD_CONFIG.with_overrides(
            dialog_base_url=self.DIALOG_BASE_URL,
            confirmation_timeout=self.CONFIRMATION_TIMEOUT_SECONDS,
        )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> APISettings:
    """
    Retrieve validated API settings.

    Returns:
        Validated API settings object

    Raises:
        ValidationError: If configuration fails validation
    """
    return APISettings()
