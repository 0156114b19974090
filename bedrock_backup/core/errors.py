"""Exceptions raised by the backup pipeline."""


class BackupError(Exception):
    """Base class for fatal backup errors."""


class NoCandidateError(BackupError):
    """No version directory matched under the server root."""


class WorldsDirMissingError(BackupError):
    """The selected version directory has no worlds directory."""


class CopyError(BackupError):
    """Copying a world entry into the backup destination failed."""

    def __init__(self, source: str, destination: str, cause: Exception):
        self.source = source
        self.destination = destination
        self.cause = cause
        super().__init__(f"Failed to copy {source} to {destination}: {cause}")
