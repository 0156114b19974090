"""Size accounting for written backups."""

import os
import logging
from typing import Optional


class SizeReporter:
    """Sums the bytes stored under a backup folder."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def compute_total_size(self, destination_directory: str) -> int:
        """Recursively sum file sizes under a directory.

        Args:
            destination_directory: Backup folder to measure.

        Returns:
            Total size in bytes.
        """
        total_size = 0
        for root, dirs, files in os.walk(destination_directory):
            for name in files:
                total_size += os.path.getsize(os.path.join(root, name))

        self.logger.debug(f"Total size of {destination_directory}: {total_size} bytes")
        return total_size
