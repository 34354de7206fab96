from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# date key -> class id -> person id -> record
AttendanceLog = Dict[str, Dict[str, Dict[str, "AttendanceRecord"]]]


@dataclass
class Person:
    """Someone on a class roster, identified by (class id, person id)."""

    id: str
    name: str
    phone: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "phone": self.phone}


@dataclass
class SchoolClass:
    id: str
    name: str
    age_range: str = ""
    teacher_name: str = ""
    roster: List[Person] = field(default_factory=list)

    def find_person(self, person_id: str) -> Optional[Person]:
        for person in self.roster:
            if person.id == person_id:
                return person
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "ageRange": self.age_range,
            "teacherName": self.teacher_name,
            "roster": [p.to_dict() for p in self.roster],
        }


@dataclass
class AttendanceRecord:
    """Presence flag and note for one person on one date.

    Either field may be unset; a record without ``present`` counts as absent.
    """

    present: Optional[bool] = None
    note: Optional[str] = None

    @property
    def is_present(self) -> bool:
        return bool(self.present)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.present is not None:
            out["present"] = self.present
        if self.note is not None:
            out["note"] = self.note
        return out


@dataclass
class Document:
    """The whole persisted state: classes, rosters and the attendance log."""

    version: int
    updated_at: str
    classes: List[SchoolClass] = field(default_factory=list)
    attendance: AttendanceLog = field(default_factory=dict)

    def find_class(self, class_id: str) -> Optional[SchoolClass]:
        for school_class in self.classes:
            if school_class.id == class_id:
                return school_class
        return None

    def dates(self) -> list[str]:
        """Recorded date keys, oldest first (ISO strings sort chronologically)."""
        return sorted(self.attendance)

    def record_for(self, date_key: str, class_id: str, person_id: str) -> Optional[AttendanceRecord]:
        return self.attendance.get(date_key, {}).get(class_id, {}).get(person_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "updatedAt": self.updated_at,
            "classes": [c.to_dict() for c in self.classes],
            "attendance": {
                date_key: {
                    class_id: {person_id: record.to_dict() for person_id, record in people.items()}
                    for class_id, people in by_class.items()
                }
                for date_key, by_class in self.attendance.items()
            },
        }
