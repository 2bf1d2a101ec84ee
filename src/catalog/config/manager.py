"""Configuration management for the application."""
from __future__ import annotations

import json
import logging
import os
import re
import threading
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Type

import yaml
from pydantic import BaseModel, ValidationError

from catalog.config.schemas import AppConfig
from catalog.infrastructure.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "CATALOG_"

# ${VAR}, ${VAR:default} or $VAR
_ENV_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::([^}]*))?\}|\$([A-Za-z_][A-Za-z0-9_]*)")


class ConfigurationManager:
    """
    Single source of truth for application configuration.

    Configuration is assembled from, in order of precedence:
    - ``CATALOG_<SECTION>__<KEY>`` environment variables
    - the JSON or YAML configuration file, if one is given
    - schema defaults

    String values in the file may reference environment variables as
    ``$VAR``, ``${VAR}`` or ``${VAR:default}``.
    """

    def __init__(self, config_file: Optional[str] = None, environ: Optional[Mapping[str, str]] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._environ = os.environ if environ is None else environ
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

    def reload(self) -> None:
        """Reload configuration from sources on next access."""
        with self._lock:
            self._app_config = None

    def get_storage_strategy(self) -> str:
        return self.app_config.storage.strategy

    def _load_app_config(self) -> AppConfig:
        config_data: Dict[str, Any] = {}
        if self._config_file:
            config_data = self.load_file(self._config_file)

        config_data = self._expand_env(config_data)
        config_data = self.apply_environment_overrides(config_data)

        try:
            app_config = AppConfig.from_dict(config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}", details=e.errors()) from e

        logger.info("Configuration loaded successfully")
        return app_config

    @staticmethod
    def load_file(config_file: str) -> Dict[str, Any]:
        """
        Load a JSON or YAML configuration file.

        Args:
            config_file: Path to the file; ``.yml``/``.yaml`` are read as YAML,
                anything else as JSON

        Returns:
            Raw configuration dictionary

        Raises:
            ConfigurationError: If the file is missing or cannot be parsed
        """
        path = Path(os.path.expandvars(config_file))
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                if path.suffix.lower() in (".yml", ".yaml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to parse configuration file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")

        logger.debug("Loaded configuration file %s", path)
        return data

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply ``CATALOG_<SECTION>__<KEY>`` overrides.

        Nested keys are separated by double underscores, e.g.
        ``CATALOG_STORAGE__SQLITE__PATH``. Values for string fields are kept
        verbatim; others are parsed as JSON when possible so ``true`` and ``5``
        keep their types.
        """
        result = dict(config_data)
        for env_name, raw_value in self._environ.items():
            if not env_name.startswith(ENV_PREFIX):
                continue
            path = [part.lower() for part in env_name[len(ENV_PREFIX):].split("__") if part]
            if len(path) < 2:
                continue

            target = result
            for key in path[:-1]:
                node = target.get(key)
                node = dict(node) if isinstance(node, dict) else {}
                target[key] = node
                target = node
            target[path[-1]] = _parse_env_value(raw_value, _expects_string(path))
            logger.debug("Applied environment override %s", env_name)
        return result

    def _expand_env(self, value: Any) -> Any:
        if isinstance(value, dict):
            return {key: self._expand_env(item) for key, item in value.items()}
        if isinstance(value, list):
            return [self._expand_env(item) for item in value]
        if isinstance(value, str):
            return _ENV_PATTERN.sub(self._substitute, value)
        return value

    def _substitute(self, match: re.Match) -> str:
        name = match.group(1) or match.group(3)
        default = match.group(2)
        if name in self._environ:
            return self._environ[name]
        if default is not None:
            return default
        # Unknown variables are left untouched
        return match.group(0)


def _expects_string(path: List[str]) -> bool:
    """Whether the schema field at ``path`` is a plain string."""
    model: Optional[Type[BaseModel]] = AppConfig
    annotation: Any = None
    for key in path:
        field = model.model_fields.get(key) if model is not None else None
        if field is None:
            return False
        annotation = field.annotation
        is_model = isinstance(annotation, type) and issubclass(annotation, BaseModel)
        model = annotation if is_model else None
    return annotation is str


def _parse_env_value(raw_value: str, keep_string: bool = False) -> Any:
    if keep_string:
        return raw_value
    try:
        return json.loads(raw_value)
    except ValueError:
        return raw_value
