"""
Configuration Management

Pydantic-settings based configuration for the expiry reminder service.
All settings can be overridden via environment variables.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Environment variables are prefixed with REMINDERS_ and are case-insensitive.
    Example: REMINDERS_DYNAMODB_TABLE_NAME=employees-staging
    """

    model_config = SettingsConfigDict(
        env_prefix="REMINDERS_",
        env_file=[".env.local", ".env"],  # Try .env.local first
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # DynamoDB Configuration
    dynamodb_table_name: str = Field(
        default="employees",
        description="DynamoDB table holding employee records",
    )
    dynamodb_endpoint_url: str | None = Field(
        default=None,
        description="DynamoDB endpoint URL (for local development)",
    )

    # SES Configuration
    ses_from_address: str = Field(
        default="pre@kapitalfibra.es",
        description="From address for reminder emails",
    )
    ses_from_name: str | None = Field(
        default=None,
        description="Optional display name for reminder emails",
    )
    ses_configuration_set: str | None = Field(
        default=None,
        description="SES configuration set for tracking",
    )
    ses_endpoint_url: str | None = Field(
        default=None,
        description="SES endpoint URL (use 'mock' for local)",
    )

    # Reminder Configuration
    reminder_subject: str = Field(
        default="Important Reminder: Upcoming Expiration(s)",
        description="Subject line of every reminder email",
    )
    window_days: int = Field(
        default=5,
        ge=0,
        description="Days after today included in the sweep window",
    )
    poll_interval_seconds: int = Field(
        default=60,
        gt=0,
        description="Seconds between sweeps in the looping watcher",
    )
    timezone: str = Field(
        default="UTC",
        description="IANA timezone used to decide what 'today' is",
    )

    # AWS Configuration
    aws_region: str = Field(
        default="eu-west-1",
        description="AWS region",
    )

    # Application Configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: Literal["json", "console"] = Field(
        default="json",
        description="structlog renderer (json for Lambda, console for a terminal)",
    )

    @property
    def dynamodb_config(self) -> dict:
        """DynamoDB client configuration."""
        config = {"region_name": self.aws_region}
        if self.dynamodb_endpoint_url and self.dynamodb_endpoint_url != "mock":
            config["endpoint_url"] = self.dynamodb_endpoint_url
        return config

    @property
    def ses_config(self) -> dict:
        """SES client configuration."""
        config = {"region_name": self.aws_region}
        if self.ses_endpoint_url and self.ses_endpoint_url != "mock":
            config["endpoint_url"] = self.ses_endpoint_url
        return config


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached application settings.

    Uses lru_cache to ensure settings are loaded only once.
    Call Settings.model_validate({}) in tests to override.
    """
    return Settings()
