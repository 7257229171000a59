"""
rdf-jsonld Configuration Loader

This module provides functionality to load and validate rdf-jsonld
configuration from YAML files. Missing sections and keys fall back to
default values, and a few settings can be overridden from the environment.
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
import logging

from pydantic import ValidationError

from ..model.jsonld_model import ProcessorOptions

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

DEFAULT_CONFIG_PATHS = [
    "rdfjsonld_config/rdfjsonld-config.yaml",  # Standard location
    "config/rdfjsonld-config.yaml",  # Alternative location
]


class ConfigurationError(Exception):
    """Raised when there are configuration loading or validation errors."""
    pass


def _env_flag(name: str) -> Optional[bool]:
    value = os.getenv(name)
    if value is None:
        return None
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class RdfJsonLdConfig:
    """
    rdf-jsonld configuration loader and manager.

    Loads configuration from a YAML file and provides access to configuration
    sections with validation and default values.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration loader.

        Args:
            config_path: Path to configuration file. When None, only defaults
                and environment overrides apply.
        """
        self.config_data: Dict[str, Any] = {}
        self.config_path: Optional[str] = None

        if config_path is not None:
            self.load_config(config_path)

    def load_config(self, config_path: str) -> None:
        """
        Load configuration from a specific file path.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            ConfigurationError: If the file cannot be loaded or parsed
        """
        config_file = Path(config_path)

        if not config_file.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                self.config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Error parsing YAML configuration: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Error loading configuration file: {e}") from e

        if not isinstance(self.config_data, dict):
            raise ConfigurationError(f"Configuration root must be a mapping: {config_path}")

        self.config_path = str(config_file.absolute())
        logger.info(f"Loaded configuration from: {self.config_path}")

    def _get_default_config(self) -> Dict[str, Any]:
        """
        Get the default configuration values.

        Returns:
            Dictionary containing default configuration values
        """
        return {
            'processor': {
                'use_rdf_type': False,
                'use_native_types': False,
                'indent': 2
            },
            'app': {
                'log_level': 'INFO'
            }
        }

    def get_processor_config(self) -> Dict[str, Any]:
        """
        Get processor configuration section merged with defaults.

        Supports environment variable overrides:
        - RDFJSONLD_USE_RDF_TYPE: Emit rdf:type as a property
        - RDFJSONLD_USE_NATIVE_TYPES: Coerce literals to JSON natives

        Returns:
            Dictionary containing processor configuration
        """
        defaults = self._get_default_config()['processor']
        config = {**defaults, **(self.config_data.get('processor') or {})}

        use_rdf_type = _env_flag('RDFJSONLD_USE_RDF_TYPE')
        if use_rdf_type is not None:
            config['use_rdf_type'] = use_rdf_type

        use_native_types = _env_flag('RDFJSONLD_USE_NATIVE_TYPES')
        if use_native_types is not None:
            config['use_native_types'] = use_native_types

        return config

    def get_app_config(self) -> Dict[str, Any]:
        """
        Get application configuration section merged with defaults.

        Returns:
            Dictionary containing app configuration
        """
        defaults = self._get_default_config()['app']
        return {**defaults, **(self.config_data.get('app') or {})}

    def get_processor_options(self) -> ProcessorOptions:
        """
        Build validated processor options.

        Raises:
            ConfigurationError: If the processor section is invalid
        """
        try:
            return ProcessorOptions(**self.get_processor_config())
        except ValidationError as e:
            raise ConfigurationError(f"Invalid processor configuration: {e}") from e

    def get_log_level(self) -> str:
        """Log level name, RDFJSONLD_LOG_LEVEL taking precedence over the file."""
        level = os.getenv('RDFJSONLD_LOG_LEVEL', self.get_app_config().get('log_level', 'INFO'))
        return str(level).upper()

    def validate_config(self) -> None:
        """
        Validate the loaded configuration.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        self.get_processor_options()

        level = self.get_log_level()
        if level not in VALID_LOG_LEVELS:
            raise ConfigurationError(f"Invalid log level: {level}")

        logger.debug("Configuration validation passed")

    def __str__(self) -> str:
        """String representation of the configuration."""
        return f"RdfJsonLdConfig(path={self.config_path}, sections={list(self.config_data.keys())})"


def find_config_path() -> Optional[str]:
    """Return the first existing default configuration file, if any."""
    for config_path in DEFAULT_CONFIG_PATHS:
        if Path(config_path).exists():
            return config_path
    return None


# Global configuration instance
_config_instance: Optional[RdfJsonLdConfig] = None


def get_config(config_path: Optional[str] = None) -> RdfJsonLdConfig:
    """
    Get the global configuration instance.

    Args:
        config_path: Optional path to configuration file. Only used on first call.

    Returns:
        RdfJsonLdConfig instance
    """
    global _config_instance

    if _config_instance is None:
        _config_instance = RdfJsonLdConfig(config_path or find_config_path())
        _config_instance.validate_config()

    return _config_instance


def reload_config(config_path: Optional[str] = None) -> RdfJsonLdConfig:
    """
    Reload the global configuration instance.

    Args:
        config_path: Optional path to configuration file

    Returns:
        New RdfJsonLdConfig instance
    """
    global _config_instance

    _config_instance = RdfJsonLdConfig(config_path or find_config_path())
    _config_instance.validate_config()

    return _config_instance
