"""
Configuration Management System for Shopfront

This module provides a centralized configuration system with a 3-tier
precedence hierarchy: environment → user → system defaults.
"""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from shopfront.shared.config import SETTINGS_DIR

logger = logging.getLogger(__name__)


class ValidationLevel(Enum):
    """Configuration validation strictness levels"""
    STRICT = "strict"      # Fail fast on validation errors
    LENIENT = "lenient"    # Log warnings, use defaults


class CatalogConfig(BaseModel):
    """Catalog source and filtering"""
    model_config = ConfigDict(extra='forbid')

    source: Optional[str] = Field(default=None, description="JSON file path or http(s) URL; None uses the built-in catalog")
    price_threshold: int = Field(default=5000, description="Products priced below this (smallest currency unit) appear in the reduced list")
    request_timeout: float = Field(default=10.0, ge=0.5, le=120.0, description="Remote catalog timeout (seconds)")


class CartConfig(BaseModel):
    """Cart persistence between sessions"""
    model_config = ConfigDict(extra='forbid')

    persist: bool = Field(default=True, description="Save the cart on exit and restore it on start")
    path: str = Field(default="data/cart.json", description="Cart file path, relative to the working directory")


class UIConfig(BaseModel):
    """UI Configuration"""
    model_config = ConfigDict(extra='forbid')

    flet_web_mode: bool = Field(default=False, description="Serve the desktop shell over HTTP")
    flet_port: int = Field(default=8550, ge=1024, le=65535, description="Web server port")
    theme_mode: str = Field(default="dark", description="UI theme mode")
    currency_symbol: str = Field(default="$", min_length=1, max_length=3)


class LoggingConfig(BaseModel):
    """Log file and verbosity"""
    model_config = ConfigDict(extra='forbid')

    level: str = Field(default="DEBUG", description="File handler level")
    log_dir: str = Field(default="data/logs", description="Directory for shopfront.log")
    max_bytes: int = Field(default=5 * 1024 * 1024, ge=1024)
    backup_count: int = Field(default=3, ge=0, le=20)


class SystemConfig(BaseModel):
    """Complete system configuration"""
    model_config = ConfigDict(extra='forbid')

    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    cart: CartConfig = Field(default_factory=CartConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    schema_version: int = Field(default=1, description="Configuration schema version")


# Environment variable -> (section, key, converter)
ENV_OVERRIDES = {
    'SHOPFRONT_CATALOG_SOURCE': ('catalog', 'source', str),
    'SHOPFRONT_PRICE_THRESHOLD': ('catalog', 'price_threshold', int),
    'SHOPFRONT_REQUEST_TIMEOUT': ('catalog', 'request_timeout', float),
    'SHOPFRONT_CART_PERSIST': ('cart', 'persist', bool),
    'SHOPFRONT_CART_PATH': ('cart', 'path', str),
    'FLET_WEB_MODE': ('ui', 'flet_web_mode', bool),
    'FLET_PORT': ('ui', 'flet_port', int),
    'LOG_LEVEL': ('logging', 'level', str),
}


def _to_bool(value: str) -> bool:
    return value.strip().lower() in ('true', '1', 'yes', 'on')


class ConfigManager:
    """Centralized configuration manager with 3-tier precedence hierarchy"""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = Path(config_dir) if config_dir is not None else SETTINGS_DIR
        self._system_config: Optional[SystemConfig] = None
        self._user_config: Optional[Dict[str, Any]] = None

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load a YAML mapping; missing or unreadable files yield {}"""
        if not file_path.exists():
            return {}

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.warning(f"Failed to load {file_path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring {file_path}: top level is not a mapping")
            return {}
        return data

    def _save_yaml_file(self, file_path: Path, data: Dict[str, Any]) -> bool:
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(file_path, 'w', encoding='utf-8') as f:
                yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False, indent=2)
            return True
        except OSError as e:
            logger.error(f"Failed to save {file_path}: {e}")
            return False

    def _load_system_defaults(self) -> SystemConfig:
        if self._system_config is None:
            defaults_dict = self._load_yaml_file(self.config_dir / "defaults.yaml")
            try:
                self._system_config = SystemConfig(**defaults_dict)
            except ValidationError as e:
                logger.warning(f"System defaults validation failed: {e}")
                self._system_config = SystemConfig()
        return self._system_config

    def _load_user_config(self) -> Dict[str, Any]:
        if self._user_config is None:
            self._user_config = self._load_yaml_file(self.config_dir / "user.yaml")
        return self._user_config

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
        for env_key, (section, config_key, convert) in ENV_OVERRIDES.items():
            value = os.getenv(env_key)
            if value is None:
                continue
            try:
                converted = _to_bool(value) if convert is bool else convert(value)
            except ValueError:
                logger.warning(f"Ignoring {env_key}={value!r}: not a valid {convert.__name__}")
                continue
            overrides.setdefault(section, {})[config_key] = converted
        return overrides

    def _merge_configs(self) -> Dict[str, Any]:
        """Merge configurations with precedence: env → user → system"""
        merged = self._load_system_defaults().model_dump()
        self._deep_merge(merged, self._load_user_config())
        self._deep_merge(merged, self._get_env_overrides())
        return merged

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

    def save_user_config(self, config_updates: Dict[str, Any]) -> bool:
        """Merge updates into user.yaml and drop the cached copy"""
        user_path = self.config_dir / "user.yaml"
        existing_config = self._load_yaml_file(user_path)
        self._deep_merge(existing_config, config_updates)

        success = self._save_yaml_file(user_path, existing_config)
        if success:
            self._user_config = None
        return success


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
