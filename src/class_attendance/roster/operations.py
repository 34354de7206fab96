"""Roster mutations.

Each function copies the document first and returns the copy; the input
document is never touched.
"""
from __future__ import annotations

import copy

from ..common.datetime_utils import now_iso
from ..documents.model import Document, Person


def set_teacher(document: Document, class_id: str, name: str) -> Document:
    doc = copy.deepcopy(document)
    school_class = doc.find_class(class_id)
    if not school_class:
        return doc

    school_class.teacher_name = name
    doc.updated_at = now_iso()
    return doc


def add_person(document: Document, class_id: str, person: Person) -> Document:
    doc = copy.deepcopy(document)
    school_class = doc.find_class(class_id)
    if not school_class:
        return doc

    school_class.roster.append(copy.deepcopy(person))
    doc.updated_at = now_iso()
    return doc


def remove_person(document: Document, class_id: str, person_id: str) -> Document:
    """Drop a person from the roster together with all of their records."""
    doc = copy.deepcopy(document)
    school_class = doc.find_class(class_id)
    if not school_class or not school_class.find_person(person_id):
        return doc

    school_class.roster = [p for p in school_class.roster if p.id != person_id]
    for by_class in doc.attendance.values():
        by_class.get(class_id, {}).pop(person_id, None)
    doc.updated_at = now_iso()
    return doc


def set_person_phone(document: Document, class_id: str, person_id: str, phone: str) -> Document:
    doc = copy.deepcopy(document)
    school_class = doc.find_class(class_id)
    person = school_class.find_person(person_id) if school_class else None
    if not person:
        return doc

    person.phone = phone
    doc.updated_at = now_iso()
    return doc
