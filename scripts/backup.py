"""Backup the attendance document.

Writes the current export (same bytes as the Export button) into ./backups.
With a remote configured, the document is reconciled first so the backup holds
the newest copy.
"""

from __future__ import annotations

from pathlib import Path

from class_attendance.container import build_container
from class_attendance.documents.backup import write_backup
from class_attendance.main import load_settings


def main() -> None:
    container = build_container(settings=load_settings())
    container.store.start()

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    try:
        out_file = write_backup(container.store, out_dir)
    finally:
        container.store.close()
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
