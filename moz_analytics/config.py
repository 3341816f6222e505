"""Configuration management for the Moz analytics client.

This module handles environment variable loading and provides type-safe
configuration access using Pydantic models.
"""

import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.moz.com/jsonrpc"


class Config(BaseSettings):
    """Application configuration loaded from environment variables and .env file.

    All configuration values are automatically loaded from:
    1. `.env` file in the project root (if present)
    2. Environment variables (as fallback)

    Attributes:
        moz_api_token: Moz API credential (required). Either a raw V3 token
            or a base64 encoded ``access_id:secret_key`` pair
        moz_api_url: JSON-RPC endpoint of the Moz API
        request_timeout: Total timeout in seconds for a single remote call
        default_locale: Locale used when a caller does not pass one
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    moz_api_token: str = Field(
        ...,
        description="Moz API token or base64 encoded access_id:secret_key",
        min_length=1,
    )

    moz_api_url: str = Field(
        default=DEFAULT_API_URL,
        description="Moz JSON-RPC endpoint",
    )

    request_timeout: float = Field(
        default=30.0,
        description="Total timeout in seconds for a single remote call",
        ge=1.0,
        le=300.0,
    )

    default_locale: str = Field(
        default="en-US",
        description="Locale used when a caller does not pass one",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    @field_validator("moz_api_token")
    @classmethod
    def validate_moz_api_token(cls, value: str) -> str:
        """Strip surrounding whitespace from the token.

        Raises:
            ValueError: If the token is blank
        """
        stripped = value.strip()
        if not stripped:
            raise ValueError("moz_api_token must not be blank")
        return stripped

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate log level is one of the allowed values.

        Args:
            value: Log level string to validate

        Returns:
            Uppercase log level string

        Raises:
            ValueError: If log level is not one of the allowed values
        """
        allowed_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in allowed_levels:
            raise ValueError(
                f"log_level must be one of {allowed_levels}, got {value}"
            )
        return upper_value


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance.

    Loads configuration from `.env` file (if present) and environment variables
    on first call and returns the same instance on subsequent calls.

    Returns:
        Config instance with loaded configuration values

    Raises:
        pydantic.ValidationError: If required configuration values are
            missing or invalid
    """
    global _config
    if _config is None:
        _config = Config()
        # Never log the token itself
        logger.debug(
            f"Configuration loaded: "
            f"MOZ_API_TOKEN={'set' if _config.moz_api_token else 'missing'}, "
            f"MOZ_API_URL={_config.moz_api_url}, "
            f"REQUEST_TIMEOUT={_config.request_timeout}"
        )
    return _config


def reload_config() -> Config:
    """Reload configuration from environment variables.

    Useful for testing or when configuration changes at runtime.

    Returns:
        New Config instance with reloaded configuration values
    """
    global _config
    _config = Config()
    return _config
