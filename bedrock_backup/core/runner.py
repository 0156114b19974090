"""Main backup run coordinator."""

import logging
from pathlib import Path
from typing import Optional

from .errors import BackupError
from .models import BackupResult, RunOutcome, RunStatus
from .resolver import PathResolver
from .retention import RetentionPolicy
from .size_reporter import SizeReporter
from .world_locator import WorldLocator
from .writer import BackupWriter
from ..config.config_manager import ConfigManager
from ..utils.formatters import date_tag as today_tag, format_megabytes

FAILURE_MESSAGE = "Backup operation failed."


class BackupRunner:
    """Runs one backup of the latest server installation's worlds."""

    def __init__(self, config_manager: ConfigManager,
                 logger: Optional[logging.Logger] = None):
        """Initialize backup runner.

        Args:
            config_manager: Configuration manager with loaded configuration.
            logger: Logger shared by every pipeline component.
        """
        self.config_manager = config_manager
        self.logger = logger or logging.getLogger(__name__)
        self.resolver = None
        self.locator = None
        self.writer = None
        self.size_reporter = None
        self.retention = None

        # Initialize components
        self._initialize_components()

    def _initialize_components(self):
        """Initialize pipeline components."""
        server_config = self.config_manager.get_server_config()
        self.resolver = PathResolver(
            version_prefix=server_config.get('version_prefix', 'bedrock-server'),
            logger=self.logger
        )
        self.locator = WorldLocator(
            worlds_directory=server_config.get('worlds_directory', 'worlds'),
            logger=self.logger
        )
        self.writer = BackupWriter(logger=self.logger)
        self.size_reporter = SizeReporter(logger=self.logger)

        # Retention only runs when explicitly enabled
        retention_config = self.config_manager.get_retention_config()
        if retention_config.get('enabled', False):
            self.retention = RetentionPolicy(
                days=retention_config.get('days', 30),
                logger=self.logger
            )

    def run(self, date_tag: Optional[str] = None) -> RunOutcome:
        """Run a complete backup.

        Fatal errors, including unexpected filesystem errors, are logged
        and returned in the outcome instead of being raised.

        Args:
            date_tag: Date used in backup names, defaults to today.

        Returns:
            RunOutcome describing how the run ended.
        """
        try:
            return self._run(date_tag or today_tag())
        except (BackupError, OSError) as e:
            self.logger.error(str(e))
            self.logger.error(FAILURE_MESSAGE)
            return RunOutcome(status=RunStatus.FAILED, error=e)

    def _run(self, date_tag: str) -> RunOutcome:
        server_root = self.config_manager.get_server_root()
        backup_root = self.config_manager.get_backup_directory()

        self.logger.info("Starting world backup")
        self._ensure_backup_root(backup_root)

        version = self.resolver.select_latest_version_directory(server_root)
        entries = self.locator.list_world_entries(version.path)

        if not entries:
            self.logger.warning(f"No world data found in {self.locator.worlds_path(version.path)}, nothing to back up")
            return RunOutcome(status=RunStatus.EMPTY_WORLDS, version=version)

        destination = self.writer.write_backup(entries, backup_root, date_tag)
        total_bytes = self.size_reporter.compute_total_size(destination.path)
        result = BackupResult(destination_path=destination.path, total_bytes=total_bytes)

        if self.retention:
            self.retention.prune(backup_root, keep=destination.path)

        self.logger.info(f"Backup completed: {result.destination_path} ({format_megabytes(total_bytes)})")
        return RunOutcome(status=RunStatus.SUCCESS, version=version, result=result)

    def _ensure_backup_root(self, backup_root: str):
        try:
            Path(backup_root).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise BackupError(f"Could not create backup directory {backup_root}: {e}") from e
