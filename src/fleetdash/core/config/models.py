"""
Configuration models for FleetDash.

Pydantic-based configuration models providing validation and documentation
for the client configuration, plus the environment-variable settings that
can override it.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fleetdash.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FILE_SIZE_BYTES,
    DEFAULT_TIMEOUT_MS,
    MAX_TIMEOUT_MS,
    MIN_LOG_FILE_SIZE_BYTES,
    MIN_TIMEOUT_MS,
    MS_PER_SECOND,
)


class LogLevel(str, Enum):
    """Valid logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class ApiConfig(BaseModel):
    """Backend connection settings."""

    base_url: str = Field(DEFAULT_BASE_URL, description="Backend base URL, endpoints are appended verbatim")
    timeout: int = Field(
        DEFAULT_TIMEOUT_MS,
        ge=MIN_TIMEOUT_MS,
        le=MAX_TIMEOUT_MS,
        description="Request timeout in milliseconds",
    )

    model_config = {"validate_assignment": True}

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")

    @property
    def timeout_seconds(self) -> float:
        return self.timeout / MS_PER_SECOND


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.WARNING, description="Logging level")
    format: str = Field("console", description="Log format: console, json, rich")
    output: List[str] = Field(["console"], description="Log outputs: console, file")
    file_path: Optional[Path] = Field(None, description="Log file path")
    max_file_size: int = Field(
        DEFAULT_LOG_FILE_SIZE_BYTES,
        ge=MIN_LOG_FILE_SIZE_BYTES,
        description="Maximum log file size in bytes",
    )
    backup_count: int = Field(
        DEFAULT_LOG_BACKUP_COUNT,
        ge=1,
        le=20,
        description="Number of backup log files to keep",
    )

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in ["console", "json", "rich"]:
            raise ValueError("format must be one of: console, json, rich")
        return v

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: List[str]) -> List[str]:
        valid_outputs = {"console", "file"}
        for output in v:
            if output not in valid_outputs:
                raise ValueError(
                    f"output must contain only: {', '.join(sorted(valid_outputs))}"
                )
        return v


class StorageConfig(BaseModel):
    """Where the auth token is persisted between runs."""

    token_file: Optional[Path] = Field(
        None, description="Token storage file (defaults to storage.json next to config.toml)"
    )

    @field_validator("token_file")
    @classmethod
    def expand_token_file(cls, v: Optional[Path]) -> Optional[Path]:
        if v is None:
            return None
        return Path(v).expanduser()


class FleetDashConfig(BaseModel):
    """Main FleetDash configuration model."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)

    model_config = {
        "extra": "forbid",
        "validate_assignment": True,
        "str_strip_whitespace": True,
    }


class FleetDashSettings(BaseSettings):
    """Settings that can be overridden by environment variables."""

    fleetdash_api_base_url: Optional[str] = Field(None, alias="FLEETDASH_API_BASE_URL")
    fleetdash_api_timeout: Optional[int] = Field(None, alias="FLEETDASH_API_TIMEOUT")

    fleetdash_logging_level: Optional[str] = Field(None, alias="FLEETDASH_LOGGING_LEVEL")
    fleetdash_logging_format: Optional[str] = Field(None, alias="FLEETDASH_LOGGING_FORMAT")
    fleetdash_logging_file_path: Optional[str] = Field(
        None, alias="FLEETDASH_LOGGING_FILE_PATH"
    )

    fleetdash_token_file: Optional[str] = Field(None, alias="FLEETDASH_TOKEN_FILE")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )
