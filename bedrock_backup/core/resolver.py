"""Version directory discovery for server installations."""

import os
import re
import logging
from datetime import datetime
from typing import List, Optional

from .errors import NoCandidateError
from .models import VersionDirectory


class PathResolver:
    """Finds server version directories and picks the most recently modified one."""

    def __init__(self, version_prefix: str = "bedrock-server",
                 logger: Optional[logging.Logger] = None):
        """Initialize path resolver.

        Args:
            version_prefix: Literal prefix of version directory names.
            logger: Logger used for progress messages.
        """
        self.version_prefix = version_prefix
        self.pattern = re.compile(rf"^{re.escape(version_prefix)}-\d+\.\d+\.\d+")
        self.logger = logger or logging.getLogger(__name__)

    def matches(self, name: str) -> bool:
        """Check whether a directory name looks like a version directory."""
        return self.pattern.match(name) is not None

    def find_version_directories(self, root_path: str) -> List[VersionDirectory]:
        """List version directories directly under a server root.

        Args:
            root_path: Directory containing server installations.

        Returns:
            List of VersionDirectory objects in enumeration order.

        Raises:
            NoCandidateError: If the root does not exist or is not a directory.
        """
        if not os.path.exists(root_path):
            raise NoCandidateError(f"Server root does not exist: {root_path}")

        if not os.path.isdir(root_path):
            raise NoCandidateError(f"Server root is not a directory: {root_path}")

        candidates = []
        with os.scandir(root_path) as entries:
            for entry in entries:
                if not entry.is_dir() or not self.matches(entry.name):
                    continue
                entry_stat = entry.stat()
                candidates.append(VersionDirectory(
                    name=entry.name,
                    path=entry.path,
                    modified_time=datetime.fromtimestamp(entry_stat.st_mtime),
                    modified_ns=entry_stat.st_mtime_ns
                ))

        self.logger.debug(f"Found {len(candidates)} version directories in {root_path}")
        return candidates

    def select_latest_version_directory(self, root_path: str) -> VersionDirectory:
        """Select the version directory with the latest modification time.

        Equal modification times resolve to the greatest name.

        Args:
            root_path: Directory containing server installations.

        Returns:
            The selected VersionDirectory.

        Raises:
            NoCandidateError: If no directory matches the version pattern.
        """
        candidates = self.find_version_directories(root_path)
        if not candidates:
            raise NoCandidateError(
                f"No '{self.version_prefix}-X.Y.Z' directory found in {root_path}"
            )

        latest = max(candidates, key=lambda c: (c.modified_ns, c.name))
        self.logger.info(f"Latest version directory: {latest.name}")
        return latest
