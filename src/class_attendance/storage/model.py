from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import SyncMode, SyncStatus


@dataclass(frozen=True)
class PushAck:
    """Remote answer to a document push."""

    ok: bool
    updated_at: Optional[str] = None


@dataclass(frozen=True)
class SyncState:
    mode: SyncMode
    status: SyncStatus
    last_pushed_at: Optional[str] = None
    remote_updated_at: Optional[str] = None
