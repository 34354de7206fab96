from __future__ import annotations

from class_attendance.attendance.operations import set_note, set_presence
from class_attendance.documents.model import AttendanceRecord
from class_attendance.documents.normalizer import ensure_document_shape

OLD_TS = "2025-01-01T00:00:00.000Z"


def _doc():
    return ensure_document_shape({"updatedAt": OLD_TS, "classes": [{"id": "c1", "name": "One", "roster": [{"id": "p1", "name": "Ana"}]}]})


def test_set_presence_creates_nested_entries():
    doc = _doc()

    updated = set_presence(doc, "2025-01-05", "c1", "p1", True)

    assert updated.attendance == {"2025-01-05": {"c1": {"p1": AttendanceRecord(present=True)}}}
    assert updated.updated_at > OLD_TS
    assert doc.attendance == {}


def test_set_presence_keeps_existing_note():
    doc = set_note(_doc(), "2025-01-05", "c1", "p1", "arrived late")

    updated = set_presence(doc, "2025-01-05", "c1", "p1", False)

    assert updated.record_for("2025-01-05", "c1", "p1") == AttendanceRecord(present=False, note="arrived late")


def test_set_note_without_presence():
    updated = set_note(_doc(), "2025-01-05", "c1", "p1", "traveling")

    record = updated.record_for("2025-01-05", "c1", "p1")
    assert record.present is None
    assert record.note == "traveling"
    assert record.to_dict() == {"note": "traveling"}


def test_mutations_do_not_share_records():
    first = set_presence(_doc(), "2025-01-05", "c1", "p1", True)

    second = set_presence(first, "2025-01-05", "c1", "p1", False)

    assert first.record_for("2025-01-05", "c1", "p1").present is True
    assert second.record_for("2025-01-05", "c1", "p1").present is False
