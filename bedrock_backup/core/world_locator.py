"""Locates and enumerates the world data of a server installation."""

import os
import logging
from typing import List, Optional

from .errors import WorldsDirMissingError
from .models import WorldEntry


class WorldLocator:
    """Lists the entries of a version directory's worlds folder."""

    def __init__(self, worlds_directory: str = "worlds",
                 logger: Optional[logging.Logger] = None):
        self.worlds_directory = worlds_directory
        self.logger = logger or logging.getLogger(__name__)

    def worlds_path(self, version_dir_path: str) -> str:
        return os.path.join(version_dir_path, self.worlds_directory)

    def list_world_entries(self, version_dir_path: str) -> List[WorldEntry]:
        """Enumerate the immediate entries of the worlds folder.

        Entries come back in filesystem enumeration order, which is not
        guaranteed to be sorted.

        Args:
            version_dir_path: Path of the selected version directory.

        Returns:
            List of WorldEntry objects, empty if the folder has no content.

        Raises:
            WorldsDirMissingError: If the worlds folder does not exist.
        """
        worlds_path = self.worlds_path(version_dir_path)
        if not os.path.isdir(worlds_path):
            raise WorldsDirMissingError(f"Worlds directory not found: {worlds_path}")

        self.logger.info(f"Worlds directory: {worlds_path}")

        results = []
        with os.scandir(worlds_path) as entries:
            for entry in entries:
                if entry.is_dir():
                    results.append(WorldEntry(
                        name=entry.name,
                        path=entry.path,
                        is_directory=True
                    ))
                else:
                    results.append(WorldEntry(
                        name=entry.name,
                        path=entry.path,
                        is_directory=False,
                        size=entry.stat().st_size
                    ))

        self.logger.debug(f"Found {len(results)} entries in {worlds_path}")
        return results
