from __future__ import annotations

from datetime import datetime
from pathlib import Path

from ..core.constants import BACKUP_FILE_PREFIX
from ..storage.store import AttendanceStore


def write_backup(store: AttendanceStore, out_dir: Path, *, now: datetime | None = None) -> Path:
    """Write the current document export into ``out_dir`` and return the file path."""
    now = now or datetime.now()
    out_dir.mkdir(parents=True, exist_ok=True)

    out_file = out_dir / f"{BACKUP_FILE_PREFIX}_{now.strftime('%Y%m%d_%H%M%S')}.json"
    out_file.write_bytes(store.export_json())
    return out_file
