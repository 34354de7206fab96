"""State shape normalization.

Whatever comes out of the local cache, the remote service or an imported file
is parsed here into a well-formed :class:`Document`. Entries that cannot be
parsed are dropped instead of being carried around half-typed.
"""
from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any, Optional

from ..common.datetime_utils import now_iso
from ..core.constants import DEFAULT_CLASSES, DOCUMENT_VERSION
from .model import AttendanceLog, AttendanceRecord, Document, Person, SchoolClass


def default_classes() -> list[SchoolClass]:
    return [
        SchoolClass(id=c["id"], name=c["name"], age_range=c["ageRange"], teacher_name="", roster=[])
        for c in DEFAULT_CLASSES
    ]


def default_document() -> Document:
    return Document(version=DOCUMENT_VERSION, updated_at=now_iso(), classes=default_classes(), attendance={})


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _parse_version(value: Any) -> int:
    if not value:
        return DOCUMENT_VERSION
    try:
        version = int(value)
    except (TypeError, ValueError, OverflowError):
        return DOCUMENT_VERSION
    # versions start at 1
    return version if version >= 1 else DOCUMENT_VERSION


def _parse_person(raw: Any) -> Optional[Person]:
    if not isinstance(raw, Mapping):
        return None
    return Person(id=_text(raw.get("id")), name=_text(raw.get("name")), phone=_text(raw.get("phone")))


def _parse_class(raw: Any) -> Optional[SchoolClass]:
    if not isinstance(raw, Mapping):
        return None

    roster_raw = raw.get("roster")
    if not isinstance(roster_raw, list):
        roster_raw = []
    roster = [p for p in (_parse_person(item) for item in roster_raw) if p is not None]

    return SchoolClass(
        id=_text(raw.get("id")),
        name=_text(raw.get("name")),
        age_range=_text(raw.get("ageRange")),
        teacher_name=_text(raw.get("teacherName")),
        roster=roster,
    )


def _parse_record(raw: Any) -> Optional[AttendanceRecord]:
    if not isinstance(raw, Mapping):
        return None

    present = raw.get("present")
    note = raw.get("note")
    return AttendanceRecord(
        present=None if present is None else bool(present),
        note=None if note is None else _text(note),
    )


def _parse_attendance(raw: Any) -> AttendanceLog:
    if not isinstance(raw, Mapping):
        return {}

    log: AttendanceLog = {}
    for date_key, by_class in raw.items():
        log[_text(date_key)] = {}
        if not isinstance(by_class, Mapping):
            continue
        for class_id, people in by_class.items():
            records: dict[str, AttendanceRecord] = {}
            if isinstance(people, Mapping):
                for person_id, record_raw in people.items():
                    record = _parse_record(record_raw)
                    if record is not None:
                        records[_text(person_id)] = record
            log[_text(date_key)][_text(class_id)] = records
    return log


def ensure_document_shape(value: Any) -> Document:
    """Return a well-formed document for any input, filling defaults."""

    if isinstance(value, Document):
        return copy.deepcopy(value)
    if not isinstance(value, Mapping):
        return default_document()

    classes_raw = value.get("classes")
    if isinstance(classes_raw, list):
        classes = [c for c in (_parse_class(item) for item in classes_raw) if c is not None]
    else:
        classes = default_classes()

    updated_at = value.get("updatedAt")
    return Document(
        version=_parse_version(value.get("version")),
        updated_at=_text(updated_at) if updated_at else now_iso(),
        classes=classes,
        attendance=_parse_attendance(value.get("attendance")),
    )
