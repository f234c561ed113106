"""
Application Configuration Module

Centralizes all configuration using environment variables with Pydantic Settings.
Supports two kinds of mode:
    - DEVELOPMENT: Emails go to an in-memory mock transport (no API keys needed)
    - STAGING / PRODUCTION: Emails are delivered through SendGrid

Usage:
    from elsabor.core.config import get_settings

    settings = get_settings()
    if settings.is_development:
        # Use mock mail transport
    else:
        # Use SendGrid

Author: El Sabor Web Team
Version: 1.0.0
"""

import logging
import sys
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


PACKAGE_DIR = Path(__file__).resolve().parent.parent


class EnvironmentMode(str, Enum):
    """
    Application environment modes.

    Attributes:
        DEVELOPMENT: Local testing with the mock mail transport
        PRODUCTION: Live environment sending real email
        STAGING: Pre-production with real email delivery
    """
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    STAGING = "staging"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables or .env file.
    Sensitive values (API keys) should NEVER be committed to version control.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # ENVIRONMENT
    # ==========================================================================

    env_mode: EnvironmentMode = Field(
        default=EnvironmentMode.DEVELOPMENT,
        description="Application environment mode"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging"
    )

    # ==========================================================================
    # APPLICATION
    # ==========================================================================

    app_name: str = Field(
        default="El Sabor Web",
        description="Application display name"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Application version"
    )
    api_host: str = Field(
        default="0.0.0.0",
        description="HTTP server host"
    )
    api_port: int = Field(
        default=3000,
        description="HTTP server port"
    )

    # ==========================================================================
    # RESTAURANT
    # ==========================================================================

    restaurant_name: str = Field(
        default="El Sabor",
        description="Restaurant display name"
    )

    # ==========================================================================
    # EMAIL
    # ==========================================================================

    email_user: str = Field(
        default="reservas@elsabor.example",
        description="Operator mailbox; also used as the sender address"
    )
    sendgrid_api_key: Optional[str] = Field(
        default=None,
        description="SendGrid API Key"
    )
    mock_email_failure_rate: float = Field(
        default=0.0,
        ge=0.0,
        le=1.0,
        description="Simulated failure rate of the mock mail transport"
    )
    mock_email_latency: float = Field(
        default=0.0,
        ge=0.0,
        description="Simulated latency (seconds) of the mock mail transport"
    )
    mock_email_outbox_size: int = Field(
        default=50,
        ge=1,
        description="Number of recent messages the mock mail transport keeps"
    )

    # ==========================================================================
    # SECURITY
    # ==========================================================================

    rate_limit_enabled: bool = Field(
        default=True,
        description="Apply the per-client request limit"
    )
    rate_limit: str = Field(
        default="100 per 15 minutes",
        description="Requests allowed per client address across all pages"
    )
    content_security_policy: str = Field(
        default="script-src 'self' https://cdn.jsdelivr.net 'unsafe-inline';",
        description="Content-Security-Policy header sent with every response"
    )

    # ==========================================================================
    # LANGUAGES
    # ==========================================================================

    default_language: str = Field(
        default="es",
        description="Language used by unprefixed routes and as fallback"
    )
    supported_languages: str = Field(
        default="es,en",
        description="Comma-separated list of supported language codes"
    )
    locales_directory: str = Field(
        default=str(PACKAGE_DIR / "locales"),
        description="Directory holding <lang>.json dictionaries"
    )

    # ==========================================================================
    # CONTENT
    # ==========================================================================

    gallery_photos: str = Field(
        default="images/foto1.jpg,images/foto2.jpg",
        description="Comma-separated gallery photo paths, relative to /static"
    )

    # ==========================================================================
    # VALIDATORS
    # ==========================================================================

    @field_validator("env_mode", mode="before")
    @classmethod
    def validate_env_mode(cls, v: str) -> EnvironmentMode:
        """Convert string to EnvironmentMode enum."""
        if isinstance(v, EnvironmentMode):
            return v
        try:
            return EnvironmentMode(v.lower())
        except ValueError:
            valid = [e.value for e in EnvironmentMode]
            raise ValueError(f"Invalid env_mode. Must be one of: {valid}")

    # ==========================================================================
    # COMPUTED PROPERTIES
    # ==========================================================================

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.env_mode == EnvironmentMode.DEVELOPMENT

    @property
    def use_real_services(self) -> bool:
        """Check if real email delivery should be used."""
        return self.env_mode in (EnvironmentMode.PRODUCTION, EnvironmentMode.STAGING)

    @property
    def supported_languages_list(self) -> list[str]:
        """Get supported language codes as a list."""
        return [code.strip() for code in self.supported_languages.split(",") if code.strip()]

    @property
    def gallery_photos_list(self) -> list[str]:
        """Get gallery photo paths as a list."""
        return [p.strip() for p in self.gallery_photos.split(",") if p.strip()]

    # ==========================================================================
    # VALIDATION METHODS
    # ==========================================================================

    def validate_production_config(self) -> list[str]:
        """
        Validate that all required production settings are configured.

        Returns:
            List of missing configuration keys (empty if all present)
        """
        missing = []

        if self.use_real_services:
            if not self.sendgrid_api_key:
                missing.append("SENDGRID_API_KEY")
            if not self.email_user:
                missing.append("EMAIL_USER")

        return missing


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns:
        Settings: Configured application settings
    """
    return Settings()


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Configure application-wide logging.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)

    Returns:
        Configured package logger
    """
    settings = get_settings()

    if settings.debug:
        level = logging.DEBUG

    log_format = "%(asctime)s │ %(levelname)-8s │ %(name)-25s │ %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=level,
        format=log_format,
        datefmt=date_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("python_http_client").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)

    return logging.getLogger("elsabor")
