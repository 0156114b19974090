"""Core backup functionality."""

from .runner import BackupRunner
from .resolver import PathResolver
from .world_locator import WorldLocator
from .writer import BackupWriter, backup_name_for
from .size_reporter import SizeReporter
from .retention import RetentionPolicy
from .errors import BackupError, NoCandidateError, WorldsDirMissingError, CopyError
from .models import VersionDirectory, WorldEntry, BackupDestination, BackupResult, RunOutcome, RunStatus

__all__ = [
    "BackupRunner", "PathResolver", "WorldLocator", "BackupWriter", "backup_name_for",
    "SizeReporter", "RetentionPolicy",
    "BackupError", "NoCandidateError", "WorldsDirMissingError", "CopyError",
    "VersionDirectory", "WorldEntry", "BackupDestination", "BackupResult", "RunOutcome", "RunStatus",
]
