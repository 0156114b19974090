"""Configuration management for world backups."""

import os
import yaml
from typing import Dict, List, Any, Optional
from .config_validator import ConfigValidator


class ConfigManager:
    """Manages configuration loading and validation for backup runs."""

    DEFAULT_CONFIG_LOCATIONS = [
        "config.yaml",
        "config.yml",
        os.path.expanduser("~/.bedrock-backup/config.yaml"),
        os.path.expanduser("~/.bedrock-backup/config.yml"),
        "/etc/bedrock-backup/config.yaml",
        "/etc/bedrock-backup/config.yml"
    ]

    def __init__(self, config_path: Optional[str] = None,
                 search_paths: Optional[List[str]] = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional path to config file. If not provided,
                        will search in default locations.
            search_paths: Locations searched when no config_path is given.
        """
        self.config_path = config_path
        self.search_paths = search_paths if search_paths is not None else self.DEFAULT_CONFIG_LOCATIONS
        self.config_data: Dict[str, Any] = {}
        self.loaded_from: Optional[str] = None
        self.validator = ConfigValidator()

    def load_config(self, overrides: Optional[Dict[str, Any]] = None,
                    required_paths: Optional[List[str]] = None) -> Dict[str, Any]:
        """Load configuration from file and apply overrides.

        Args:
            overrides: Top-level keys that replace values from the file.
                None values are ignored.
            required_paths: Path keys that must be set, defaults to all of them.

        Returns:
            Dictionary containing configuration data.

        Raises:
            FileNotFoundError: If an explicit config file cannot be found.
            ValueError: If config file is invalid.
        """
        config_file = self._find_config_file()
        self.config_data = {}

        if config_file:
            try:
                with open(config_file, 'r', encoding='utf-8') as f:
                    self.config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in config file {config_file}: {e}")
            except OSError as e:
                raise ValueError(f"Error reading config file {config_file}: {e}")

            if not isinstance(self.config_data, dict):
                raise ValueError(f"Config file {config_file} must contain a mapping")
        self.loaded_from = config_file

        for key, value in (overrides or {}).items():
            if value is not None:
                self.config_data[key] = value

        self._set_defaults()

        # Validate configuration
        self.validator.validate(self.config_data, required_paths)

        return self.config_data

    def _find_config_file(self) -> Optional[str]:
        """Find configuration file in default locations.

        Returns:
            Path to configuration file, or None if none exists.

        Raises:
            FileNotFoundError: If an explicit config path does not exist.
        """
        if self.config_path:
            if os.path.exists(self.config_path):
                return self.config_path
            else:
                raise FileNotFoundError(f"Config file not found: {self.config_path}")

        for location in self.search_paths:
            if os.path.exists(location):
                return location

        return None

    def _set_defaults(self):
        """Set default values for optional configuration parameters."""
        self.config_data.setdefault('log_file', os.path.join('logs', 'bedrock_backup.log'))

        defaults = {
            'server': {
                'version_prefix': 'bedrock-server',
                'worlds_directory': 'worlds'
            },
            'logging': {
                'level': 'INFO'
            },
            'retention': {
                'enabled': False,
                'days': 30
            }
        }

        # Merge defaults with existing config
        for section, section_defaults in defaults.items():
            if not self.config_data.get(section):
                self.config_data[section] = {}
            elif not isinstance(self.config_data[section], dict):
                raise ValueError(f"Configuration section {section} must be a mapping")
            for key, value in section_defaults.items():
                if key not in self.config_data[section]:
                    self.config_data[section][key] = value

    def get_server_root(self) -> str:
        return self.config_data['server_root_directory']

    def get_backup_directory(self) -> str:
        return self.config_data['backup_directory']

    def get_log_file(self) -> Optional[str]:
        return self.config_data.get('log_file')

    def get_server_config(self) -> Dict[str, Any]:
        """Get server layout configuration.

        Returns:
            Server configuration dictionary.
        """
        return self.config_data.get('server', {})

    def get_logging_config(self) -> Dict[str, Any]:
        """Get logging configuration.

        Returns:
            Logging configuration dictionary.
        """
        return self.config_data.get('logging', {})

    def get_retention_config(self) -> Dict[str, Any]:
        """Get retention configuration.

        Returns:
            Retention configuration dictionary.
        """
        return self.config_data.get('retention', {})
