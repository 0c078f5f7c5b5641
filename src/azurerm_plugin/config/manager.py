"""Unified configuration management for the plugin."""
from __future__ import annotations
import json
import logging
import os
import threading
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from azurerm_plugin.domain.core.exceptions import ConfigurationError
from azurerm_plugin.config.env_expansion import expand_env_vars
from azurerm_plugin.config.schemas import AppConfig

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV_VAR = "AZURERM_PLUGIN_CONFIG"

# Standard ARM_* variables override the provider section of the file.
ENVIRONMENT_OVERRIDES = {
    "ARM_SUBSCRIPTION_ID": "subscription_id",
    "ARM_TENANT_ID": "tenant_id",
    "ARM_CLIENT_ID": "client_id",
    "ARM_CLIENT_SECRET": "client_secret",
    "ARM_ENVIRONMENT": "environment",
}


class ConfigurationManager:
    """
    Single source of truth for plugin configuration.

    Configuration is loaded lazily from, in order of precedence:
    - the standard ARM_* environment variables
    - the configuration file (JSON or YAML), with environment variables expanded
    - schema defaults
    """

    def __init__(self, config_file: Optional[str] = None, environ: Optional[Mapping[str, str]] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file or os.environ.get(CONFIG_FILE_ENV_VAR)
        self._environ = environ if environ is not None else os.environ
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        config_data: Dict[str, Any] = {}
        if self._config_file:
            config_data = self.load_from_file(self._config_file)

        config_data = self.apply_environment_overrides(config_data)

        try:
            return AppConfig.from_dict(config_data)
        except PydanticValidationError as e:
            missing = [
                ".".join(str(part) for part in error["loc"])
                for error in e.errors()
                if error["type"] == "missing"
            ]
            raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=missing) from e

    @staticmethod
    def load_from_file(path: str) -> Dict[str, Any]:
        """Read a JSON or YAML configuration file and expand environment variables."""
        if not os.path.exists(path):
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                if path.endswith((".yml", ".yaml")):
                    data = yaml.safe_load(f) or {}
                else:
                    data = json.load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read configuration file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")

        logger.debug("Loaded configuration from %s", path)
        return expand_env_vars(data)

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply ARM_* environment variables to the provider section."""
        provider = dict(config_data.get("provider") or {})
        for env_var, field_name in ENVIRONMENT_OVERRIDES.items():
            value = self._environ.get(env_var)
            if value:
                provider[field_name] = value
        return {**config_data, "provider": provider}

    def reload(self) -> None:
        """Reload configuration from sources."""
        with self._lock:
            self._app_config = None
