from __future__ import annotations

from ..common.validators import require_date_key
from ..core.exceptions import ValidationError
from ..documents.model import AttendanceRecord
from ..storage.store import AttendanceStore
from . import operations


class AttendanceService:
    """Use cases: taking weekly attendance for one class."""

    def __init__(self, store: AttendanceStore):
        self._store = store

    def _require_person(self, class_id: str, person_id: str) -> None:
        school_class = self._store.document.find_class(class_id)
        if not school_class:
            raise ValidationError(f"Class {class_id!r} does not exist")
        if not school_class.find_person(person_id):
            raise ValidationError("Person not found in this class")

    def set_presence(self, date_key: str, class_id: str, person_id: str, present: bool) -> None:
        date_key = require_date_key(date_key)
        self._require_person(class_id, person_id)
        self._store.apply(operations.set_presence, date_key, class_id, person_id, bool(present))

    def set_note(self, date_key: str, class_id: str, person_id: str, note: str) -> None:
        date_key = require_date_key(date_key)
        self._require_person(class_id, person_id)
        self._store.apply(operations.set_note, date_key, class_id, person_id, note or "")

    def records_for(self, date_key: str, class_id: str) -> dict[str, AttendanceRecord]:
        """Records of every roster member for the date; unrecorded people get an empty record."""
        date_key = require_date_key(date_key)
        document = self._store.document
        school_class = document.find_class(class_id)
        if not school_class:
            return {}

        return {
            p.id: document.record_for(date_key, class_id, p.id) or AttendanceRecord()
            for p in school_class.roster
        }

    def class_summary(self, date_key: str, class_id: str) -> tuple[int, int]:
        """(present, roster size) for the "3/10 present" badge."""
        date_key = require_date_key(date_key)
        document = self._store.document
        school_class = document.find_class(class_id)
        if not school_class:
            return 0, 0

        people = document.attendance.get(date_key, {}).get(class_id, {})
        present = sum(1 for r in people.values() if r.is_present)
        return present, len(school_class.roster)
