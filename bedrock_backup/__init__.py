"""
Bedrock Backup - dated copies of a Bedrock server's world data.

This package finds the most recently updated server installation under a root
folder, copies its worlds into a dated backup folder and logs each step.
"""

__version__ = "1.0.0"

from .core.runner import BackupRunner
from .core.resolver import PathResolver
from .core.writer import BackupWriter

__all__ = ["BackupRunner", "PathResolver", "BackupWriter"]
