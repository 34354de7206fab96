"""Attendance log mutations.

Records are created on demand: date -> class -> person entries are added
when missing, then the single field is set.
"""
from __future__ import annotations

import copy

from ..common.datetime_utils import now_iso
from ..documents.model import AttendanceRecord, Document


def _ensure_record(doc: Document, date_key: str, class_id: str, person_id: str) -> AttendanceRecord:
    people = doc.attendance.setdefault(date_key, {}).setdefault(class_id, {})
    return people.setdefault(person_id, AttendanceRecord())


def set_presence(document: Document, date_key: str, class_id: str, person_id: str, present: bool) -> Document:
    doc = copy.deepcopy(document)
    _ensure_record(doc, date_key, class_id, person_id).present = bool(present)
    doc.updated_at = now_iso()
    return doc


def set_note(document: Document, date_key: str, class_id: str, person_id: str, note: str) -> Document:
    doc = copy.deepcopy(document)
    _ensure_record(doc, date_key, class_id, person_id).note = note
    doc.updated_at = now_iso()
    return doc
