"""Statistics derived from a document snapshot.

Everything is recomputed from scratch on each call; documents are small.
"""
from __future__ import annotations

import math
from typing import Sequence

from ..core.constants import DROPOUT_STREAK_THRESHOLD
from ..documents.model import Document, SchoolClass
from .model import ClassBreakdown, DatePoint, PersonMetrics


def _present_count(people: dict) -> int:
    return sum(1 for record in people.values() if record.is_present)


def by_date_series(document: Document) -> list[DatePoint]:
    """Present counts per recorded date, oldest first."""
    return [
        DatePoint(date=date_key, present_count=sum(_present_count(people) for people in document.attendance[date_key].values()))
        for date_key in document.dates()
    ]


def rank_dates(series: Sequence[DatePoint]) -> list[DatePoint]:
    """Highest attendance first; ties keep their date order."""
    return sorted(series, key=lambda p: p.present_count, reverse=True)


def last_date_breakdown(document: Document) -> list[ClassBreakdown]:
    dates = document.dates()
    if not dates:
        return []

    by_class = document.attendance[dates[-1]]
    return [
        ClassBreakdown(class_id=c.id, class_name=c.name, present_count=_present_count(by_class.get(c.id, {})))
        for c in document.classes
    ]


def attendance_percentage(present_count: int, weeks_total: int) -> int:
    if not weeks_total:
        return 0
    # half rounds up: 12.5% -> 13%
    return int(math.floor(present_count / weeks_total * 100 + 0.5))


def _metrics_for(document: Document, dates: list[str], school_class: SchoolClass, person) -> PersonMetrics:
    weeks_total = len(dates)
    present_count = 0
    last_attendance = None
    absent_streak = 0

    for date_key in reversed(dates):
        record = document.record_for(date_key, school_class.id, person.id)
        if record is not None and record.is_present:
            present_count += 1
            if last_attendance is None:
                last_attendance = date_key
        elif last_attendance is None:
            absent_streak += 1

    return PersonMetrics(
        class_id=school_class.id,
        person_id=person.id,
        name=person.name,
        phone=person.phone,
        class_name=school_class.name,
        teacher_name=school_class.teacher_name,
        weeks_total=weeks_total,
        present_count=present_count,
        attendance_percentage=attendance_percentage(present_count, weeks_total),
        last_attendance_date=last_attendance,
        current_absent_streak=absent_streak,
        dropout_alert=absent_streak >= DROPOUT_STREAK_THRESHOLD,
    )


def person_metrics(document: Document) -> list[PersonMetrics]:
    """Per-person streaks and percentages, people needing follow-up first."""
    dates = document.dates()
    metrics = [
        _metrics_for(document, dates, school_class, person)
        for school_class in document.classes
        for person in school_class.roster
    ]
    metrics.sort(key=lambda m: (not m.dropout_alert, -m.current_absent_streak, m.name.casefold()))
    return metrics
