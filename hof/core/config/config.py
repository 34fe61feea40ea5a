"""
Static configuration management for hof.

Purpose
-------
Provides centralized static configuration for the logging layer, loaded from
environment variables with sensible defaults and type validation.

Responsibilities
----------------
- Provide type-safe access to the logging settings
- Fall back to defaults (with a warning) when a value is malformed
- Track which values came from the environment and which from defaults
- Load a `.env` file when the host application asks for it

Non-Responsibilities
--------------------
- Factory behaviour. Channel bounds, the lives floor and pocket prices live
  in `hof.modules.shared.constants` and no environment variable changes them.

Architecture Notes
------------------
- Singleton pattern via class methods (no instantiation)
- Reads the process environment on import via Config.validate(); a `.env`
  file is only read by an explicit `Config.load_env_file()` call

Dependencies
------------
- python-dotenv: `.env` loading on request

Environment Variables
---------------------
- ENVIRONMENT: Environment type (default: development)
- DEBUG: Debug mode flag (default: False)
- LOG_LEVEL: Logging level (default: INFO)
- LOG_JSON: Emit JSON log lines (default: production only)
"""

import logging
import os
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv


class Environment(Enum):
    """Deployment environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"

    @classmethod
    def from_string(cls, value: str) -> "Environment":
        """
        Parse environment string safely with fallback.

        Example
        -------
        >>> Environment.from_string("production") == Environment.PRODUCTION
        True
        >>> Environment.from_string("invalid") == Environment.DEVELOPMENT
        True
        """
        try:
            return cls(value.lower())
        except ValueError:
            logging.warning(f"Unknown environment '{value}', defaulting to development")
            return cls.DEVELOPMENT


class _ConfigLoadMetrics:
    """Records where each setting came from and which ones were rejected."""

    def __init__(self):
        self.env_vars_loaded: Dict[str, bool] = {}
        self.validation_errors: Dict[str, str] = {}
        self.last_reload: Optional[str] = None

    def record_env_load(self, key: str, from_env: bool):
        self.env_vars_loaded[key] = from_env

    def record_validation_error(self, key: str, error: str):
        self.validation_errors[key] = error

    def get_summary(self) -> Dict[str, Any]:
        return {
            "total_configs": len(self.env_vars_loaded),
            "from_environment": sum(1 for v in self.env_vars_loaded.values() if v),
            "validation_errors": len(self.validation_errors),
            "last_reload": self.last_reload,
        }


class Config:
    """
    Centralized static configuration for hof.

    Usage
    -----
    >>> Config.load_env_file()          # optional, reads ./.env
    >>> Config.is_production()
    False
    """

    _metrics: Optional[_ConfigLoadMetrics] = None
    _validated: bool = False

    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_JSON: Optional[bool] = None

    @classmethod
    def _init_metrics(cls):
        if cls._metrics is None:
            cls._metrics = _ConfigLoadMetrics()

    @classmethod
    def _safe_bool(cls, key: str, default: Optional[bool]) -> Optional[bool]:
        """
        Safely parse boolean from environment.

        Recognizes: true/false, yes/no, 1/0, on/off (case-insensitive).
        """
        cls._init_metrics()

        raw_value = os.getenv(key)
        cls._metrics.record_env_load(key, raw_value is not None)

        if raw_value is None:
            return default

        normalized = raw_value.lower().strip()
        if normalized in {"true", "yes", "1", "on"}:
            return True
        if normalized in {"false", "no", "0", "off"}:
            return False

        error = f"{key}='{raw_value}' is not a valid boolean, using default {default}"
        logging.warning(error)
        cls._metrics.record_validation_error(key, error)
        return default

    @classmethod
    def _safe_str(cls, key: str, default: str) -> str:
        cls._init_metrics()
        cls._metrics.record_env_load(key, key in os.environ)
        return os.getenv(key, default)

    @classmethod
    def load(cls) -> None:
        """Read every setting from the current process environment."""
        cls._init_metrics()

        cls.ENVIRONMENT = Environment.from_string(
            cls._safe_str("ENVIRONMENT", "development")
        ).value
        cls.DEBUG = cls._safe_bool("DEBUG", False)
        cls.LOG_LEVEL = cls._safe_str("LOG_LEVEL", "INFO")
        cls.LOG_JSON = cls._safe_bool("LOG_JSON", None)

        cls._metrics.last_reload = datetime.now(timezone.utc).isoformat()

    @classmethod
    def validate(cls) -> None:
        """Load configuration once and normalize invalid values. Never raises."""
        if cls._validated:
            return

        logger = logging.getLogger(__name__)
        cls.load()

        valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if cls.LOG_LEVEL.upper() not in valid_log_levels:
            logger.warning(f"Invalid LOG_LEVEL '{cls.LOG_LEVEL}', using INFO")
            cls._metrics.record_validation_error(
                "LOG_LEVEL", f"LOG_LEVEL='{cls.LOG_LEVEL}' is not a logging level"
            )
            cls.LOG_LEVEL = "INFO"

        if cls.is_production() and cls.DEBUG:
            logger.warning("DEBUG mode enabled in production!")

        cls._validated = True
        logger.debug(f"Configuration loaded: {cls._metrics.get_summary()}")

    @classmethod
    def reload(cls) -> None:
        """Re-read configuration from the environment."""
        cls._validated = False
        cls.validate()

    @classmethod
    def load_env_file(cls, path: Optional[Union[str, Path]] = None) -> bool:
        """
        Load a `.env` file into the environment and reload.

        Existing environment variables win over the file, as with
        `python-dotenv` defaults.

        Returns
        -------
        bool
            True if a file was found and read
        """
        found = load_dotenv(dotenv_path=path)
        cls.reload()
        return found

    @classmethod
    def is_production(cls) -> bool:
        return cls.ENVIRONMENT == "production"

    @classmethod
    def is_development(cls) -> bool:
        return cls.ENVIRONMENT == "development"

    @classmethod
    def is_testing(cls) -> bool:
        return cls.ENVIRONMENT == "testing"

    @classmethod
    def get_metrics(cls) -> Optional[_ConfigLoadMetrics]:
        return cls._metrics

    @classmethod
    def get_config_summary(cls) -> Dict[str, Any]:
        return {
            "environment": cls.ENVIRONMENT,
            "debug": cls.DEBUG,
            "log_level": cls.LOG_LEVEL,
            "log_json": cls.LOG_JSON,
        }


Config.validate()
