"""
Configuration Management System for the Pot Catalog

Centralized configuration with a 4-tier precedence hierarchy:
environment → project → user → system defaults.
"""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from potcatalog.shared.config import SETTINGS_DIR

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = SETTINGS_DIR


class ValidationLevel(Enum):
    """Configuration validation strictness levels"""
    STRICT = "strict"      # Fail fast on validation errors
    LENIENT = "lenient"    # Log warnings, use defaults


class UIConfig(BaseModel):
    """UI Configuration"""
    model_config = ConfigDict(extra='forbid')

    flet_web_mode: bool = Field(default=False, description="Serve the app over HTTP instead of a native window")
    flet_port: int = Field(default=8550, ge=1024, le=65535, description="Web server port")
    flet_web_renderer: str = Field(default="auto", description="Web renderer: auto or canvaskit")

    # Theme and appearance
    theme_mode: str = Field(default="light", description="UI theme mode")
    primary_color: str = Field(default="#007bff", description="Primary UI color")
    window_width: int = Field(default=420, ge=240, le=4096, description="Desktop window width")
    window_height: int = Field(default=820, ge=320, le=4096, description="Desktop window height")


class TextConfig(BaseModel):
    """User-visible strings"""
    model_config = ConfigDict(extra='forbid')

    title: str = Field(default="My Pot Catalog")

    # Form
    name_label: str = Field(default="Pot Name")
    name_hint: str = Field(default="e.g. Ceramic pot in the living room")
    location_label: str = Field(default="Location")
    location_hint: str = Field(default="e.g. Living Room")
    flowers_label: str = Field(default="Flowers (comma separated)")
    flowers_hint: str = Field(default="e.g. Roses, Lilies, Tulips")
    submit_button: str = Field(default="Add Pot")

    # Validation prompt
    missing_fields_title: str = Field(default="Attention")
    missing_fields_message: str = Field(default="Please fill in the pot name and location.")
    dismiss_button: str = Field(default="OK")

    # List
    location_prefix: str = Field(default="Location: ")
    flowers_prefix: str = Field(default="Flowers: ")
    remove_button: str = Field(default="Remove")
    empty_message: str = Field(default="No pots catalogued yet.")

    # Removal prompt
    confirm_remove_title: str = Field(default="Remove Pot")
    confirm_remove_message: str = Field(default="Are you sure you want to remove this pot?")
    cancel_button: str = Field(default="Cancel")
    confirm_remove_button: str = Field(default="Yes, remove")


class LoggingConfig(BaseModel):
    """Logging Configuration"""
    model_config = ConfigDict(extra='forbid')

    level: str = Field(default="DEBUG", description="File log level")
    console_level: str = Field(default="WARNING", description="Console log level")
    log_dir: str = Field(default="data/logs", description="Directory for rotating log files")
    max_bytes: int = Field(default=10 * 1024 * 1024, ge=1024, description="Rotate after this many bytes")
    backup_count: int = Field(default=5, ge=0, le=100, description="Rotated files to keep")


class SystemConfig(BaseModel):
    """Complete system configuration"""
    model_config = ConfigDict(extra='forbid')

    ui: UIConfig = Field(default_factory=UIConfig)
    text: TextConfig = Field(default_factory=TextConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Metadata
    schema_version: int = Field(default=1, description="Configuration schema version")


# Environment variable -> (section, key)
ENV_OVERRIDES = {
    'FLET_WEB_MODE': ('ui', 'flet_web_mode'),
    'FLET_PORT': ('ui', 'flet_port'),
    'FLET_WEB_RENDERER': ('ui', 'flet_web_renderer'),
    'LOG_LEVEL': ('logging', 'level'),
    'LOG_DIR': ('logging', 'log_dir'),
}


class ConfigManager:
    """Centralized configuration manager with 4-tier precedence hierarchy"""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = Path(config_dir) if config_dir else DEFAULT_CONFIG_DIR
        self._system_config: Optional[SystemConfig] = None
        self._user_config: Optional[Dict[str, Any]] = None
        self._project_config: Optional[Dict[str, Any]] = None

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load YAML configuration file"""
        if not file_path.exists():
            return {}

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.warning(f"Failed to load {file_path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring {file_path}: top level must be a mapping")
            return {}
        return data

    def _load_system_defaults(self) -> SystemConfig:
        """Load system default configuration"""
        if self._system_config is None:
            defaults_dict = self._load_yaml_file(self.config_dir / "defaults.yaml")

            try:
                self._system_config = SystemConfig(**defaults_dict)
            except ValidationError as e:
                logger.warning(f"System defaults validation failed: {e}")
                self._system_config = SystemConfig()

        return self._system_config

    def _load_user_config(self) -> Dict[str, Any]:
        """Load user-level configuration"""
        if self._user_config is None:
            self._user_config = self._load_yaml_file(self.config_dir / "user.yaml")
        return self._user_config

    def _load_project_config(self) -> Dict[str, Any]:
        """Load project-specific configuration"""
        if self._project_config is None:
            self._project_config = self._load_yaml_file(self.config_dir / "project.yaml")
        return self._project_config

    def _merge_configs(self) -> Dict[str, Any]:
        """Merge configurations with precedence: env → project → user → system"""
        merged = self._load_system_defaults().model_dump()
        self._deep_merge(merged, self._load_user_config())
        self._deep_merge(merged, self._load_project_config())
        self._deep_merge(merged, self._get_env_overrides())
        return merged

    def _deep_merge(self, base: Dict[str, Any], updates: Dict[str, Any]) -> None:
        """Deep merge configuration dictionaries"""
        for key, value in updates.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def _get_env_overrides(self) -> Dict[str, Any]:
        """Extract configuration overrides from environment variables"""
        overrides: Dict[str, Any] = {}
        for env_key, (section, config_key) in ENV_OVERRIDES.items():
            value = os.getenv(env_key)
            if value is None:
                continue

            if config_key == 'flet_port':
                try:
                    converted: Any = int(value)
                except ValueError:
                    logger.warning(f"Ignoring {env_key}={value!r}: not an integer")
                    continue
            elif config_key == 'flet_web_mode':
                converted = value.lower() in ('true', '1', 'yes', 'on')
            elif config_key == 'level':
                converted = value.upper()
            else:
                converted = value

            overrides.setdefault(section, {})[config_key] = converted

        return overrides

    def get_config(self, validation_level: ValidationLevel = ValidationLevel.STRICT) -> SystemConfig:
        """Get merged configuration with validation"""
        merged_config = self._merge_configs()

        try:
            return SystemConfig(**merged_config)
        except ValidationError as e:
            if validation_level == ValidationLevel.STRICT:
                raise ValueError(f"Configuration validation failed: {e}") from e
            logger.warning(f"Configuration validation failed, using defaults: {e}")
            return SystemConfig()


# Global instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(config_dir: Optional[Path] = None) -> ConfigManager:
    """Get global configuration manager instance"""
    global _config_manager
    if _config_manager is None or config_dir is not None:
        _config_manager = ConfigManager(config_dir)
    return _config_manager


def get_config(validation_level: ValidationLevel = ValidationLevel.STRICT) -> SystemConfig:
    """Get current system configuration"""
    return get_config_manager().get_config(validation_level)
