"""
Configuration manager for FleetDash.

Loads ``config.toml`` from the user config directory, applies ``FLEETDASH_*``
environment overrides, validates the result and caches it. Also writes the
file back when the CLI changes a setting.
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w
from pydantic import ValidationError as PydanticValidationError

from fleetdash.constants import DEFAULT_TOKEN_FILE_NAME
from fleetdash.exceptions.config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)

from .models import FleetDashConfig, FleetDashSettings


@dataclass
class EnvironmentOverride:
    """Helper for applying environment variable overrides."""
    config_section: Dict[str, Any]
    settings: FleetDashSettings

    def apply_if_set(self, setting_name: str, config_key: str) -> None:
        value = getattr(self.settings, setting_name, None)
        if value is not None:
            self.config_section[config_key] = value

    def apply_string_if_set(self, setting_name: str, config_key: str) -> None:
        value = getattr(self.settings, setting_name, None)
        if value:
            self.config_section[config_key] = value


class ConfigManager:
    """Loads, validates, caches and saves the FleetDash configuration."""

    def __init__(self, config_file: Optional[Path] = None):
        """
        Args:
            config_file: Path to custom config file. If None, uses
                ``~/.config/fleetdash/config.toml``.
        """
        if config_file:
            self.config_file = Path(config_file)
        else:
            self.config_file = Path.home() / ".config" / "fleetdash" / "config.toml"

        self._config: Optional[FleetDashConfig] = None

    @property
    def config_directory(self) -> Path:
        return self.config_file.parent

    def load_config(self) -> FleetDashConfig:
        """Load and validate configuration from file and environment."""
        if self._config is not None:
            return self._config

        config_data = self._apply_env_overrides(self._read_file_data())
        self._config = self._validate(config_data)
        return self._config

    def reload_config(self) -> FleetDashConfig:
        self._config = None
        return self.load_config()

    def load_file_config(self) -> FleetDashConfig:
        """Configuration as stored in the file, without environment overrides."""
        return self._validate(self._read_file_data())

    def token_file(self) -> Path:
        """Token storage path: explicit setting or ``storage.json`` beside the config."""
        config = self.load_config()
        if config.storage.token_file is not None:
            return config.storage.token_file
        return self.config_directory / DEFAULT_TOKEN_FILE_NAME

    def _read_file_data(self) -> Dict[str, Any]:
        if not self.config_file.exists():
            return {}
        return self._load_toml_file()

    @staticmethod
    def _validate(config_data: Dict[str, Any]) -> FleetDashConfig:
        try:
            return FleetDashConfig(**config_data)
        except PydanticValidationError as e:
            raise ConfigurationValidationError(
                [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
            ) from e
        except (ValueError, TypeError) as e:
            raise ConfigurationValidationError([f"Configuration validation failed: {e}"]) from e

    def _load_toml_file(self) -> Dict[str, Any]:
        try:
            with open(self.config_file, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise InvalidConfigurationError(
                str(self.config_file), f"Invalid TOML syntax: {e}", "valid TOML format"
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read configuration file {self.config_file}: {e}",
                help_text="Check the file permissions or point --config at another file",
            ) from e

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        settings = FleetDashSettings()

        for section in ("api", "logging", "storage"):
            config_data.setdefault(section, {})

        api = EnvironmentOverride(config_data["api"], settings)
        api.apply_string_if_set("fleetdash_api_base_url", "base_url")
        api.apply_if_set("fleetdash_api_timeout", "timeout")

        log = EnvironmentOverride(config_data["logging"], settings)
        log.apply_string_if_set("fleetdash_logging_level", "level")
        log.apply_string_if_set("fleetdash_logging_format", "format")
        log.apply_string_if_set("fleetdash_logging_file_path", "file_path")

        storage = EnvironmentOverride(config_data["storage"], settings)
        storage.apply_string_if_set("fleetdash_token_file", "token_file")

        return config_data

    def save_config(self, config: Optional[FleetDashConfig] = None) -> None:
        """Write configuration to the TOML file (None values are omitted).

        Defaults to the file's own contents so that environment overrides
        never end up persisted. The cache is dropped; the next load
        re-applies the environment.
        """
        config = config or self.load_file_config()
        data = config.model_dump(mode="json", exclude_none=True)
        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "wb") as f:
                tomli_w.dump(data, f)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot write configuration file {self.config_file}: {e}",
                help_text="Check the directory permissions",
            ) from e
        self._config = None

    def set_api_config(self, base_url: Optional[str] = None, timeout: Optional[int] = None) -> FleetDashConfig:
        """Update the ``api`` section of the file and persist it."""
        config = self.load_file_config()
        for field, value in (("base_url", base_url), ("timeout", timeout)):
            if value is None:
                continue
            try:
                setattr(config.api, field, value)
            except PydanticValidationError as e:
                raise InvalidConfigurationError(f"api.{field}", value, e.errors()[0]["msg"]) from e
        self.save_config(config)
        return config
