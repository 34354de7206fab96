from __future__ import annotations

from enum import Enum


class SyncMode(str, Enum):
    """Where the document lives besides the local cache."""

    LOCAL = "local"
    REMOTE = "remote"


class SyncStatus(str, Enum):
    """Remote synchronisation state shown next to the document."""

    LOCAL = "local"
    IDLE = "idle"
    SYNCING = "syncing"
    SYNCED = "synced"
