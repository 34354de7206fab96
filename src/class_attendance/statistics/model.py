from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DatePoint:
    """Number of people marked present on one date, across all classes."""

    date: str
    present_count: int


@dataclass(frozen=True)
class ClassBreakdown:
    class_id: str
    class_name: str
    present_count: int


@dataclass(frozen=True)
class PersonMetrics:
    """Read-model for the per-person follow-up list."""

    class_id: str
    person_id: str
    name: str
    phone: str
    class_name: str
    teacher_name: str
    weeks_total: int
    present_count: int
    attendance_percentage: int
    last_attendance_date: Optional[str]
    current_absent_streak: int
    dropout_alert: bool
