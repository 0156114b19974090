"""Optional pruning of old backup folders."""

import time
import shutil
import logging
from pathlib import Path
from typing import List, Optional


class RetentionPolicy:
    """Deletes ``backup_*`` folders older than a number of days."""

    def __init__(self, days: int = 30, logger: Optional[logging.Logger] = None):
        """Initialize retention policy.

        Args:
            days: Number of days to keep backup folders.
            logger: Logger used for progress messages.
        """
        self.days = days
        self.logger = logger or logging.getLogger(__name__)

    def prune(self, backup_root: str, keep: Optional[str] = None,
              now: Optional[float] = None) -> List[str]:
        """Remove expired backup folders directly under the backup root.

        Args:
            backup_root: Directory holding dated backup folders.
            keep: Folder path that must never be removed.
            now: Reference timestamp, defaults to the current time.

        Returns:
            Paths of the folders that were deleted.
        """
        root = Path(backup_root)
        if not root.is_dir():
            return []

        cutoff_time = (now if now is not None else time.time()) - (self.days * 24 * 60 * 60)
        keep_path = Path(keep).resolve() if keep else None
        removed = []

        for backup_dir in sorted(root.glob('backup_*')):
            if not backup_dir.is_dir():
                continue
            if keep_path is not None and backup_dir.resolve() == keep_path:
                continue
            if backup_dir.stat().st_mtime >= cutoff_time:
                continue

            try:
                shutil.rmtree(backup_dir)
                removed.append(str(backup_dir))
                self.logger.info(f"Deleted old backup: {backup_dir}")
            except OSError as e:
                self.logger.warning(f"Could not delete old backup {backup_dir}: {e}")

        return removed
