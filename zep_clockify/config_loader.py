"""
Configuration loading and management.
Loads the YAML config file with CSV, logging and Clockify settings.
"""

import os
import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional
import logging

from .clockify_client import DEFAULT_ENDPOINT, ClockifyConfig
from .errors import ConfigError


logger = logging.getLogger(__name__)

GLOBAL_CONFIG_FILE = "global_config.yaml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LoggingSettings:
    level: str = "INFO"
    json_format: bool = False
    console_output: bool = True
    log_dir: Optional[Path] = None


@dataclass
class ClockifySettings:
    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = 30.0
    api_key_env: str = "API_KEY"


@dataclass
class AppConfig:
    """Application settings, defaults apply for anything not in the config file."""
    csv_encoding: str = "utf-8"
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    clockify: ClockifySettings = field(default_factory=ClockifySettings)

    def clockify_config(self, environ: Optional[Mapping[str, str]] = None) -> ClockifyConfig:
        """
        Build the Clockify connection settings.

        Args:
            environ: Environment to read the API key from (os.environ if None)

        Raises:
            ConfigError: If the API key variable is not set
        """
        environ = os.environ if environ is None else environ
        api_key = environ.get(self.clockify.api_key_env)
        if not api_key:
            raise ConfigError(f"Environment variable {self.clockify.api_key_env} is not set")

        return ClockifyConfig(
            api_key=api_key,
            endpoint=self.clockify.endpoint,
            timeout=self.clockify.timeout,
        )


class ConfigLoader:
    """Loads and caches configuration from YAML files."""

    def __init__(self, config_dir: Path):
        self.config_dir = Path(config_dir)
        self._cache = {}

    def _load_yaml(self, filepath: Path) -> dict[str, Any]:
        """Load a YAML file and cache it."""
        if filepath in self._cache:
            return self._cache[filepath]

        if not filepath.exists():
            raise FileNotFoundError(f"Config file not found: {filepath}")

        logger.info(f"Loading config: {filepath}")
        try:
            with open(filepath, 'r') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {filepath}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {filepath} must contain a mapping")

        self._cache[filepath] = data
        return data

    def load_global_config(self) -> dict[str, Any]:
        """Load global configuration."""
        return self._load_yaml(self.config_dir / GLOBAL_CONFIG_FILE)

    def load_app_config(self) -> AppConfig:
        """Load global configuration into typed settings."""
        data = self.load_global_config()

        csv_cfg = self._section(data, 'csv')
        log_cfg = self._section(data, 'logging')
        clockify_cfg = self._section(data, 'clockify')

        try:
            log_dir = log_cfg.get('log_dir')
            config = AppConfig(
                csv_encoding=str(csv_cfg.get('encoding', 'utf-8')),
                logging=LoggingSettings(
                    level=str(log_cfg.get('level', 'INFO')).upper(),
                    json_format=bool(log_cfg.get('json_format', False)),
                    console_output=bool(log_cfg.get('console_output', True)),
                    log_dir=Path(log_dir) if log_dir else None,
                ),
                clockify=ClockifySettings(
                    endpoint=str(clockify_cfg.get('endpoint', DEFAULT_ENDPOINT)),
                    timeout=float(clockify_cfg.get('timeout', 30.0)),
                    api_key_env=str(clockify_cfg.get('api_key_env', 'API_KEY')),
                ),
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid configuration value: {e}") from e

        if config.logging.level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {config.logging.level}")

        logger.info(f"Loaded app config from {self.config_dir}")
        return config

    @staticmethod
    def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
        section = data.get(name) or {}
        if not isinstance(section, dict):
            raise ConfigError(f"Config section '{name}' must be a mapping")
        return section

    def clear_cache(self):
        """Clear configuration cache (useful for testing or reload)."""
        self._cache.clear()
        logger.debug("Config cache cleared")
