"""Configuration persistence.

- config_store.py: crash-safe read/write of the canonical config file
- backup.py: append-only snapshots taken before each overwrite
"""

from .backup import BackupHandle, BackupManager
from .config_store import ConfigStore

__all__ = ["BackupHandle", "BackupManager", "ConfigStore"]
