from __future__ import annotations

import pytest

from class_attendance.documents.normalizer import ensure_document_shape
from class_attendance.statistics.calculator import (
    attendance_percentage,
    by_date_series,
    last_date_breakdown,
    person_metrics,
    rank_dates,
)
from class_attendance.statistics.model import DatePoint

DATES = ["2025-01-05", "2025-01-12", "2025-01-19", "2025-01-26", "2025-02-02"]


def _doc(classes, attendance):
    return ensure_document_shape({"updatedAt": "2025-01-01T00:00:00.000Z", "classes": classes, "attendance": attendance})


def _one_person(presence_by_date):
    """One class, one person; presence_by_date maps date -> True/False/None (None: no record)."""
    attendance = {}
    for date_key, present in presence_by_date.items():
        attendance[date_key] = {} if present is None else {"c1": {"p1": {"present": present}}}
    doc = _doc([{"id": "c1", "name": "One", "roster": [{"id": "p1", "name": "Ana"}]}], attendance)
    return person_metrics(doc)[0]


def test_by_date_series_sorted_ascending():
    doc = _doc([], {"2025-01-12": {}, "2025-01-05": {"c1": {"p1": {"present": True}}}})

    assert by_date_series(doc) == [DatePoint("2025-01-05", 1), DatePoint("2025-01-12", 0)]


def test_by_date_series_counts_across_classes_and_ignores_absent_and_note_only():
    doc = _doc(
        [],
        {
            "2025-01-05": {
                "c1": {"p1": {"present": True}, "p2": {"present": False}, "p3": {"note": "sick"}},
                "c2": {"p1": {"present": True}},
                "c3": {},
            }
        },
    )

    assert by_date_series(doc) == [DatePoint("2025-01-05", 2)]


def test_ranking_is_descending_and_stable_on_ties():
    series = [DatePoint("2025-01-05", 2), DatePoint("2025-01-12", 5), DatePoint("2025-01-19", 2)]

    assert rank_dates(series) == [DatePoint("2025-01-12", 5), DatePoint("2025-01-05", 2), DatePoint("2025-01-19", 2)]


def test_last_date_breakdown_uses_latest_date_in_class_order():
    classes = [{"id": "c1", "name": "One"}, {"id": "c2", "name": "Two"}, {"id": "c3", "name": "Three"}]
    doc = _doc(
        classes,
        {
            "2025-01-05": {"c1": {"p1": {"present": True}}},
            "2025-01-12": {"c2": {"p1": {"present": True}, "p2": {"present": True}}, "c1": {"p1": {"present": False}}},
        },
    )

    rows = last_date_breakdown(doc)

    assert [(r.class_name, r.present_count) for r in rows] == [("One", 0), ("Two", 2), ("Three", 0)]


def test_last_date_breakdown_empty_without_dates():
    assert last_date_breakdown(_doc([{"id": "c1", "name": "One"}], {})) == []


def test_streak_stops_at_most_recent_presence():
    m = _one_person({"2025-01-05": True, "2025-01-12": False, "2025-01-19": True, "2025-01-26": False})

    assert m.weeks_total == 4
    assert m.present_count == 2
    assert m.current_absent_streak == 1
    assert m.attendance_percentage == 50
    assert m.last_attendance_date == "2025-01-19"
    assert m.dropout_alert is False


def test_never_present_streak_equals_weeks_total():
    m = _one_person({d: None for d in DATES})

    assert m.current_absent_streak == 5
    assert m.attendance_percentage == 0
    assert m.last_attendance_date is None
    assert m.dropout_alert is True


@pytest.mark.parametrize(
    "weeks, expected_streak, expected_alert",
    [(0, 0, False), (1, 1, False), (2, 2, False), (3, 3, True)],
)
def test_dropout_alert_boundary(weeks, expected_streak, expected_alert):
    m = _one_person({d: False for d in DATES[:weeks]})

    assert m.weeks_total == weeks
    assert m.current_absent_streak == expected_streak
    assert m.dropout_alert is expected_alert


def test_present_on_latest_date_resets_streak():
    m = _one_person({"2025-01-05": False, "2025-01-12": False, "2025-01-19": False, "2025-01-26": True})

    assert m.current_absent_streak == 0
    assert m.dropout_alert is False
    assert m.attendance_percentage == 25


def test_percentage_rounds_half_up():
    assert attendance_percentage(1, 8) == 13
    assert attendance_percentage(1, 3) == 33
    assert attendance_percentage(2, 3) == 67
    assert attendance_percentage(0, 0) == 0


def test_same_person_id_in_two_classes_is_tracked_separately():
    doc = _doc(
        [
            {"id": "c1", "name": "One", "roster": [{"id": "p1", "name": "Ana"}]},
            {"id": "c2", "name": "Two", "roster": [{"id": "p1", "name": "Bea"}]},
        ],
        {"2025-01-05": {"c1": {"p1": {"present": True}}}},
    )

    by_name = {m.name: m for m in person_metrics(doc)}

    assert by_name["Ana"].present_count == 1
    assert by_name["Bea"].present_count == 0


def test_person_sort_order():
    classes = [
        {
            "id": "c1",
            "name": "One",
            "teacherName": "Sofía",
            "roster": [
                {"id": "p1", "name": "carla"},
                {"id": "p2", "name": "Beto"},
                {"id": "p3", "name": "alba"},
                {"id": "p4", "name": "Dani"},
            ],
        }
    ]
    attendance = {
        "2025-01-05": {"c1": {"p4": {"present": True}}},
        "2025-01-12": {"c1": {"p1": {"present": True}}},
        "2025-01-19": {"c1": {"p2": {"present": True}, "p1": {"present": True}}},
        "2025-01-26": {"c1": {"p2": {"present": True}}},
    }

    metrics = person_metrics(_doc(classes, attendance))

    # alba: streak 4 (alert), Dani: 3 (alert), carla: 1, Beto: 0
    assert [m.name for m in metrics] == ["alba", "Dani", "carla", "Beto"]
    assert [m.dropout_alert for m in metrics] == [True, True, False, False]
    assert metrics[0].teacher_name == "Sofía"
    assert metrics[0].class_name == "One"


def test_names_tiebreak_case_insensitive():
    classes = [{"id": "c1", "name": "One", "roster": [{"id": "p1", "name": "beto"}, {"id": "p2", "name": "Ana"}, {"id": "p3", "name": "Carla"}]}]

    metrics = person_metrics(_doc(classes, {}))

    assert [m.name for m in metrics] == ["Ana", "beto", "Carla"]
