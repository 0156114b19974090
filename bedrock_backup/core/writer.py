"""Copies world entries into a dated backup folder."""

import os
import shutil
import logging
from pathlib import Path
from typing import List, Optional

from .errors import CopyError
from .models import BackupDestination, WorldEntry


def backup_name_for(entry_name: str, is_directory: bool, date_tag: str) -> str:
    """Return the name an entry gets inside the backup folder.

    Directories get the date appended; files get it inserted before the
    extension, e.g. ``Server Backup.mcworld`` -> ``Server Backup_2024-01-15.mcworld``.
    """
    if is_directory:
        return f"{entry_name}_{date_tag}"

    stem, extension = os.path.splitext(entry_name)
    return f"{stem}_{date_tag}{extension}"


class BackupWriter:
    """Writes world entries into ``backup_<date>`` under a backup root."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def write_backup(self, entries: List[WorldEntry], destination_root: str,
                     date_tag: str) -> BackupDestination:
        """Copy every entry into the dated destination folder.

        Existing files of the same name are overwritten. The copy is not
        atomic: if an entry fails, entries copied before it stay in place.

        Args:
            entries: World entries in the order they should be copied.
            destination_root: Root directory for dated backup folders.
            date_tag: Date string (YYYY-MM-DD) used in all names.

        Returns:
            The BackupDestination that was written.

        Raises:
            CopyError: If creating the folder or copying an entry fails.
        """
        destination = BackupDestination(root_path=destination_root, date_tag=date_tag)

        try:
            Path(destination.path).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CopyError(destination_root, destination.path, e) from e

        self.logger.info(f"Backup destination: {destination.path}")

        for entry in entries:
            new_name = backup_name_for(entry.name, entry.is_directory, date_tag)
            target = os.path.join(destination.path, new_name)

            try:
                if entry.is_directory:
                    shutil.copytree(entry.path, target, dirs_exist_ok=True)
                else:
                    shutil.copy2(entry.path, target)
            except OSError as e:
                raise CopyError(entry.path, target, e) from e

            self.logger.info(f"Copied '{entry.name}' -> '{new_name}'")

        return destination
