"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from water_switch.domain.entities.errors import ConfigurationError
from water_switch.shared import (
    REGION_ENDPOINTS,
    EnumEnvironment,
    EnumLogLevel,
    EnumRegion,
)
from water_switch.shared.env import load_secret_file_variables


def resolve_base_url(region: EnumRegion, base_url: Optional[str] = None) -> str:
    """Explicit base URL wins over the regional endpoint."""
    if base_url:
        return base_url
    return REGION_ENDPOINTS[EnumRegion(region)]


class TuyaSettings(BaseSettings):
    """Tuya cloud project and device configuration settings."""

    access_id: str = Field(default="", description="Cloud project client id")
    access_secret: SecretStr = Field(
        default=SecretStr(""), description="Cloud project secret"
    )
    region: EnumRegion = Field(
        default=EnumRegion.EU, description="Data center region of the project"
    )
    base_url: Optional[str] = Field(
        default=None, description="Override for the regional OpenAPI endpoint"
    )
    device_id: str = Field(default="", description="Managed relay device id")
    home_id: str = Field(default="", description="Home owning the automations")
    timezone: str = Field(
        default="Asia/Jerusalem",
        description="IANA zone for automations and daily history",
    )
    request_timeout: float = Field(
        default=30.0, gt=0, description="HTTP timeout in seconds"
    )
    automation_background: Optional[str] = Field(
        default=None, description="Cover image URL sent with new automations"
    )

    model_config = SettingsConfigDict(
        env_prefix="TUYA_", case_sensitive=False, extra="ignore"
    )

    @property
    def endpoint(self) -> str:
        return resolve_base_url(self.region, self.base_url)

    def ensure_complete(self) -> None:
        """
        Raises:
            ConfigurationError: If a credential or identifier is missing
        """
        missing = [
            name
            for name, value in (
                ("TUYA_ACCESS_ID", self.access_id),
                ("TUYA_ACCESS_SECRET", self.access_secret.get_secret_value()),
                ("TUYA_DEVICE_ID", self.device_id),
                ("TUYA_HOME_ID", self.home_id),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(
                f"Missing Tuya configuration: {', '.join(missing)}",
                {"missing": missing},
            )
        if self.region not in REGION_ENDPOINTS:
            raise ConfigurationError(
                f"Unknown Tuya region: {self.region}", {"region": self.region}
            )


class MonitorSettings(BaseSettings):
    """Status monitor configuration settings."""

    poll_interval: float = Field(
        default=60.0, gt=0, description="Seconds between status polls"
    )
    refresh_delay: float = Field(
        default=1.0,
        ge=0,
        description="Seconds to wait before re-reading status after a command",
    )

    model_config = SettingsConfigDict(
        env_prefix="MONITOR_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    tuya: TuyaSettings = Field(default_factory=TuyaSettings)
    monitor: MonitorSettings = Field(default_factory=MonitorSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Secret files (``*_FILE`` variables) are resolved first. Used to be
    mocked in tests, allowing different settings based on environment.
    """
    load_secret_file_variables()
    return AppSettings()
