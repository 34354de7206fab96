from __future__ import annotations

from ..core.constants import DEFAULT_RANKING_LIMIT
from ..storage.store import AttendanceStore
from . import calculator
from .model import ClassBreakdown, DatePoint, PersonMetrics


class StatisticsService:
    """Queries over the store's current document snapshot."""

    def __init__(self, store: AttendanceStore):
        self._store = store

    def by_date(self) -> list[DatePoint]:
        return calculator.by_date_series(self._store.document)

    def ranking(self) -> list[DatePoint]:
        return calculator.rank_dates(self.by_date())

    def strongest(self, limit: int = DEFAULT_RANKING_LIMIT) -> list[DatePoint]:
        return self.ranking()[:limit]

    def weakest(self, limit: int = DEFAULT_RANKING_LIMIT) -> list[DatePoint]:
        return sorted(self.by_date(), key=lambda p: p.present_count)[:limit]

    def last_date_breakdown(self) -> list[ClassBreakdown]:
        return calculator.last_date_breakdown(self._store.document)

    def people(self, query: str = "") -> list[PersonMetrics]:
        """Per-person metrics, optionally filtered by name, class, teacher or phone."""
        metrics = calculator.person_metrics(self._store.document)
        if not query:
            return metrics

        needle = query.casefold()
        return [
            m
            for m in metrics
            if needle in m.name.casefold()
            or query in (m.phone or "")
            or needle in m.class_name.casefold()
            or needle in (m.teacher_name or "").casefold()
        ]

    def dropout_alerts(self) -> list[PersonMetrics]:
        return [m for m in self.people() if m.dropout_alert]
