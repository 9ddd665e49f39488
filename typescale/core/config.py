"""
Configuration for typescale with environment variable support.

Usage:
    from typescale.core.config import Config

    cfg = Config.get_instance()
    regular = cfg.get("TYPESCALE_FONT_REGULAR")
    protected = cfg.get_list("TYPESCALE_PROTECTED_ATTRIBUTES")
"""
import os
import re
import json
import logging
from typing import Any, Dict, Optional
from pathlib import Path

from dotenv import load_dotenv

from typescale.core.singleton import SingletonMeta
from typescale.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV = "TYPESCALE_CONFIG_FILE"
DEFAULT_CONFIG_FILE = "typescale.json"

DEFAULTS: Dict[str, Any] = {
    "TYPESCALE_LOG_LEVEL": "INFO",
    "TYPESCALE_PROTECTED_ATTRIBUTES": "",
}


class Config(metaclass=SingletonMeta):
    """
    Unified configuration reader:
    - Environment variables (.env)
    - JSON configuration file
    - Built-in defaults
    """

    def __init__(self, config_file: Optional[str] = None):
        self._env_loaded = False
        self._config_cache: Dict[str, Any] = {}

        self._load_env()
        self._config_file_path = Path(
            config_file or os.getenv(CONFIG_FILE_ENV, DEFAULT_CONFIG_FILE)
        )
        self._load_json_config()

    def _load_env(self):
        """Load environment variables from a .env file, if present"""
        env_file = Path(".env")
        if env_file.exists():
            load_dotenv(env_file)
            self._env_loaded = True
            logger.info("Environment variables loaded from .env")
        else:
            logger.debug(".env file not found, using system environment only")

    def _load_json_config(self):
        """Load configuration from the JSON file"""
        if not self._config_file_path.exists():
            logger.debug(f"Config file not found: {self._config_file_path}")
            self._config_cache = {}
            return

        try:
            with open(self._config_file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(
                f"Failed to load config file {self._config_file_path}",
                detail=str(e),
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config file {self._config_file_path} must contain a JSON object"
            )
        self._config_cache = data
        logger.info(f"Configuration loaded from {self._config_file_path}")

    @property
    def config_file(self) -> Path:
        return self._config_file_path

    def get(
            self,
            key: str,
            default: Any = None,
            required: bool = False,
            from_env: bool = True
    ) -> Any:
        """
        Get a configuration value.

        Priority order:
        1. Environment variable (if from_env=True)
        2. JSON config file
        3. Explicit default
        4. Built-in default

        Raises:
            ConfigurationError: If required=True and the key is not found
        """
        if from_env:
            env_value = os.getenv(key)
            if env_value is not None:
                return env_value

        if key in self._config_cache:
            return self._config_cache[key]

        if default is not None:
            return default

        if key in DEFAULTS:
            return DEFAULTS[key]

        if required:
            raise ConfigurationError(
                f"Required configuration '{key}' not found. "
                f"Set it in the environment or {self._config_file_path}"
            )

        return None

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self.get(key, default)

        if isinstance(value, bool):
            return value

        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes", "on")

        return bool(value)

    def get_list(self, key: str, default: list = None, separator: str = ",") -> list:
        """
        Get a list value.

        Supports JSON arrays (["a", "b"]) and separated strings ("a,b").
        """
        if default is None:
            default = []

        value = self.get(key, default)

        if isinstance(value, list):
            return [str(item).strip() for item in value if str(item).strip()]

        if isinstance(value, str):
            return [item.strip() for item in value.split(separator) if item.strip()]

        return default

    def set(self, key: str, value: Any):
        """Set a value for this process only (not persisted)."""
        self._config_cache[key] = value

    def validate(self, schema: Dict[str, Dict[str, Any]]):
        """
        Validate configuration against a schema.

        Example schema:
        {
            "TYPESCALE_LOG_LEVEL": {
                "type": str,
                "pattern": r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$"
            }
        }
        """
        errors = []

        for key, rules in schema.items():
            value = self.get(key)

            if rules.get("required", False) and value is None:
                errors.append(f"Required config '{key}' is missing")
                continue

            if "type" in rules and value is not None and not isinstance(value, rules["type"]):
                errors.append(
                    f"Config '{key}' must be {rules['type'].__name__}, "
                    f"got {type(value).__name__}"
                )

            if "pattern" in rules and value and not re.match(rules["pattern"], str(value)):
                errors.append(
                    f"Config '{key}' does not match pattern {rules['pattern']}"
                )

        if errors:
            raise ConfigurationError(
                "Configuration validation failed:\n" + "\n".join(f"- {e}" for e in errors)
            )

    def reload(self):
        """Reload configuration from files"""
        self._load_env()
        self._load_json_config()
        logger.info("Configuration reloaded")


def get_config(key: str, default: Any = None) -> Any:
    """Get a configuration value from the shared Config."""
    return Config.get_instance().get(key, default)


def get_log_level() -> str:
    return str(get_config("TYPESCALE_LOG_LEVEL")).upper()


CONFIG_SCHEMA = {
    "TYPESCALE_LOG_LEVEL": {
        "type": str,
        "pattern": r"^(?i:debug|info|warning|error|critical)$",
    },
}


def validate_config():
    """Validate the shared configuration against CONFIG_SCHEMA."""
    try:
        Config.get_instance().validate(CONFIG_SCHEMA)
        logger.debug("Configuration validated successfully")
    except ConfigurationError as e:
        logger.error(f"Configuration validation failed: {e}")
        raise
