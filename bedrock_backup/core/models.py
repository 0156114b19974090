"""Data models for world backups."""

import os
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


@dataclass
class VersionDirectory:
    """A server installation directory named after its version."""
    name: str
    path: str
    modified_time: datetime
    modified_ns: int = 0


@dataclass
class WorldEntry:
    """An item directly inside the worlds directory."""
    name: str
    path: str
    is_directory: bool
    size: Optional[int] = None


@dataclass
class BackupDestination:
    """The dated folder that receives one run's copies."""
    root_path: str
    date_tag: str

    @property
    def path(self) -> str:
        return os.path.join(self.root_path, f"backup_{self.date_tag}")


@dataclass
class BackupResult:
    """Where a backup was written and how large it is."""
    destination_path: str
    total_bytes: int


class RunStatus(Enum):
    SUCCESS = "success"
    EMPTY_WORLDS = "empty_worlds"
    FAILED = "failed"


@dataclass
class RunOutcome:
    """Final state of a backup run."""
    status: RunStatus
    version: Optional[VersionDirectory] = None
    result: Optional[BackupResult] = None
    error: Optional[Exception] = None

    @property
    def exit_code(self) -> int:
        return 1 if self.status is RunStatus.FAILED else 0
