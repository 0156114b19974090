"""Configuration validation for world backups."""

from typing import Dict, List, Any, Optional


class ConfigValidator:
    """Validates backup configuration."""

    REQUIRED_PATHS = ['server_root_directory', 'backup_directory']
    LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']

    def validate(self, config: Dict[str, Any], required_paths: Optional[List[str]] = None) -> None:
        """Validate configuration data.

        Args:
            config: Configuration dictionary to validate.
            required_paths: Path keys that must be set, defaults to REQUIRED_PATHS.

        Raises:
            ValueError: If configuration is invalid.
        """
        self._validate_paths(config, self.REQUIRED_PATHS if required_paths is None else required_paths)
        self._validate_server_config(config.get('server', {}))
        self._validate_logging_config(config.get('logging', {}))
        self._validate_retention_config(config.get('retention', {}))

    def _validate_paths(self, config: Dict[str, Any], required_paths: List[str]) -> None:
        """Validate required directory settings.

        Args:
            config: Configuration dictionary.

        Raises:
            ValueError: If required paths are missing or empty.
        """
        missing_paths = [key for key in required_paths if not config.get(key)]
        if missing_paths:
            raise ValueError(f"Missing required configuration values: {missing_paths}")

        for key in self.REQUIRED_PATHS + ['log_file']:
            value = config.get(key)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"Configuration value {key} must be a path string")

    def _validate_server_config(self, server_config: Dict[str, Any]) -> None:
        if not isinstance(server_config, dict):
            raise ValueError("Server configuration must be a dictionary")

        for key in ['version_prefix', 'worlds_directory']:
            value = server_config.get(key)
            if not isinstance(value, str) or not value:
                raise ValueError(f"Server configuration {key} must be a non-empty string")

    def _validate_logging_config(self, logging_config: Dict[str, Any]) -> None:
        level = str(logging_config.get('level', 'INFO')).upper()
        if level not in self.LOG_LEVELS:
            raise ValueError(f"Logging configuration has invalid level: {logging_config.get('level')}")

    def _validate_retention_config(self, retention_config: Dict[str, Any]) -> None:
        """Validate retention configuration.

        Args:
            retention_config: Retention configuration dictionary.

        Raises:
            ValueError: If retention configuration is invalid.
        """
        if not isinstance(retention_config.get('enabled', False), bool):
            raise ValueError("Retention configuration enabled must be true or false")

        days = retention_config.get('days', 30)
        if isinstance(days, bool) or not isinstance(days, int) or days < 1:
            raise ValueError(f"Retention configuration has invalid days: {days}")
