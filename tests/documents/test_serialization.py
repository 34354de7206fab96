from __future__ import annotations

import json
from datetime import datetime

import pytest

from class_attendance.core.exceptions import ValidationError
from class_attendance.documents.backup import write_backup
from class_attendance.documents.normalizer import ensure_document_shape
from class_attendance.documents.serialization import export_document, import_document
from class_attendance.storage.store import AttendanceStore


class MemoryCache:
    def __init__(self, raw=None):
        self.raw = raw

    def load(self):
        return self.raw

    def save(self, document):
        self.raw = document.to_dict()


def _sample():
    return ensure_document_shape(
        {
            "version": 1,
            "updatedAt": "2025-08-10T12:00:00.000Z",
            "classes": [{"id": "logos", "name": "Logos", "ageRange": "18–24 años", "teacherName": "Sofía", "roster": [{"id": "a1", "name": "Prueba Alumno", "phone": "+506 8888 8888"}]}],
            "attendance": {"2025-08-10": {"logos": {"a1": {"present": True}}}},
        }
    )


def test_export_then_import_round_trips():
    doc = _sample()

    assert import_document(export_document(doc)) == doc


def test_export_is_exact_json_of_the_document():
    doc = _sample()

    assert json.loads(export_document(doc).decode("utf-8")) == doc.to_dict()
    assert "Sofía".encode("utf-8") in export_document(doc)


def test_import_accepts_text_and_normalizes():
    doc = import_document('{"classes": "bad"}')

    assert len(doc.classes) == 5


def test_import_of_overflowing_version_is_normalized():
    doc = import_document(b'{"version": 1e999, "classes": []}')

    assert doc.version == 1
    assert doc.classes == []


def test_import_rejects_bad_json():
    with pytest.raises(ValidationError):
        import_document(b"{not json")


def test_write_backup_writes_export(tmp_path):
    store = AttendanceStore(MemoryCache(_sample().to_dict()))
    store.start()

    out_file = write_backup(store, tmp_path / "backups", now=datetime(2025, 8, 10, 9, 30, 0))

    assert out_file.name == "class_attendance_backup_20250810_093000.json"
    assert out_file.read_bytes() == store.export_json()
