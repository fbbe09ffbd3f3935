"""Configuration management for the catalog."""
from __future__ import annotations

import json
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from design_catalog.config.schemas import AppConfig
from design_catalog.domain.core.exceptions import ConfigurationError
from design_catalog.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

CONFIG_FILE_ENV = "DESIGN_CATALOG_CONFIG"

# Environment variable -> (section, field)
ENV_OVERRIDES = {
    "DESIGN_CATALOG_LOG_LEVEL": ("logging", "level"),
    "DESIGN_CATALOG_LOG_DESTINATION": ("logging", "destination"),
    "DESIGN_CATALOG_CATEGORIES": ("catalog", "categories"),
    "DESIGN_CATALOG_STOP_ON_ERROR": ("catalog", "stop_on_error"),
}


class ConfigurationManager:
    """
    Single source of truth for application configuration.

    Configuration is assembled lazily from, in increasing precedence:
    - schema defaults
    - a JSON or YAML configuration file
    - environment variable overrides
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file or os.environ.get(CONFIG_FILE_ENV)
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

    def reload(self) -> AppConfig:
        with self._lock:
            self._app_config = None
        return self.app_config

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        data: Dict[str, Any] = {}
        if self._config_file:
            data = self._read_file(Path(self._config_file))
        self._apply_env_overrides(data)

        try:
            config = AppConfig.model_validate(data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

        logger.debug("Configuration loaded", config_file=self._config_file)
        return config

    @staticmethod
    def _read_file(path: Path) -> Dict[str, Any]:
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                if path.suffix.lower() in (".yaml", ".yml"):
                    content = yaml.safe_load(f)
                else:
                    content = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot parse configuration file {path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")
        return content

    @staticmethod
    def _apply_env_overrides(data: Dict[str, Any]) -> None:
        for env_var, (section, field) in ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value is None:
                continue
            section_data = data.setdefault(section, {})
            if not isinstance(section_data, dict):
                raise ConfigurationError(f"Configuration section '{section}' must be a mapping")
            section_data[field] = value
            logger.debug("Environment override applied", variable=env_var)

    def get_logging_config(self):
        return self.app_config.logging

    def get_catalog_config(self):
        return self.app_config.catalog
