from __future__ import annotations

import uuid
from typing import Optional

from ..common.validators import require_non_empty
from ..core.constants import PERSON_ID_LENGTH
from ..core.exceptions import ValidationError
from ..documents.model import Person, SchoolClass
from ..storage.store import AttendanceStore
from . import operations


class RosterService:
    """Use cases: teachers and rosters of the fixed classes."""

    def __init__(self, store: AttendanceStore):
        self._store = store

    def list_classes(self) -> list[SchoolClass]:
        """Snapshot of the classes; edits to it are not saved."""
        return self._store.document.classes

    def find_class(self, class_id: str) -> Optional[SchoolClass]:
        return self._store.document.find_class(class_id)

    def _require_class(self, class_id: str) -> SchoolClass:
        school_class = self.find_class(class_id)
        if not school_class:
            raise ValidationError(f"Class {class_id!r} does not exist")
        return school_class

    def set_teacher(self, class_id: str, name: str) -> None:
        self._require_class(class_id)
        self._store.apply(operations.set_teacher, class_id, (name or "").strip())

    def _new_person_id(self, school_class: SchoolClass) -> str:
        taken = {p.id for p in school_class.roster}
        while True:
            person_id = uuid.uuid4().hex[:PERSON_ID_LENGTH]
            if person_id not in taken:
                return person_id

    def add_person(self, class_id: str, name: str, phone: str = "") -> Person:
        name = require_non_empty(name, "Name")
        school_class = self._require_class(class_id)

        person = Person(id=self._new_person_id(school_class), name=name, phone=(phone or "").strip())
        self._store.apply(operations.add_person, class_id, person)
        return person

    def remove_person(self, class_id: str, person_id: str) -> None:
        school_class = self._require_class(class_id)
        if not school_class.find_person(person_id):
            raise ValidationError("Person not found in this class")
        self._store.apply(operations.remove_person, class_id, person_id)

    def set_person_phone(self, class_id: str, person_id: str, phone: str) -> None:
        school_class = self._require_class(class_id)
        if not school_class.find_person(person_id):
            raise ValidationError("Person not found in this class")
        self._store.apply(operations.set_person_phone, class_id, person_id, phone or "")
