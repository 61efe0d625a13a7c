"""
Aggregation Engine — summary statistics over the whole journal.

Every operation is a pure function of the entries passed in: nothing is
cached and nothing is written back. An empty journal yields zeros and
empty groupings.

Dates are compared as plain strings. This orders correctly only while
every entry uses "YYYY-MM-DD"; other formats sort lexicographically and
are not rejected.
"""

import logging
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional, Sequence

from work_journal.models.config import JournalConfig
from work_journal.models.entry import WorkJournalEntry
from work_journal.models.stats import (
    EntrySummary,
    EquipmentUsage,
    JournalStatistics,
    TimeRange,
    TrendPoint,
)

logger = logging.getLogger(__name__)

RANGE_DAYS = {
    TimeRange.WEEK: 7,
    TimeRange.MONTH: 30,
}


def _worker_total(entry: WorkJournalEntry) -> int:
    return sum(w.count for w in entry.workers)


class AggregationEngine:
    """Computes the statistics view from a sequence of entries."""

    def __init__(self, config: Optional[JournalConfig] = None):
        self.config = config or JournalConfig()

    # --- Totals ---

    def total_entries(self, entries: Sequence[WorkJournalEntry]) -> int:
        return len(entries)

    def total_workers(self, entries: Iterable[WorkJournalEntry]) -> int:
        """Head count summed over every worker row of every entry."""
        return sum(_worker_total(e) for e in entries)

    def total_equipment(self, entries: Iterable[WorkJournalEntry]) -> int:
        """Equipment records, not distinct names."""
        return sum(len(e.equipment) for e in entries)

    def total_activities(self, entries: Iterable[WorkJournalEntry]) -> int:
        return sum(len(e.activities) for e in entries)

    # --- Groupings ---

    def workers_by_qualification(
        self, entries: Iterable[WorkJournalEntry]
    ) -> Dict[str, int]:
        """Head count per qualification. Carries no ordering guarantee."""
        totals: Dict[str, int] = {}
        for entry in entries:
            for worker in entry.workers:
                label = worker.qualification or self.config.unspecified_label
                totals[label] = totals.get(label, 0) + worker.count
        return totals

    def equipment_usage(
        self,
        entries: Iterable[WorkJournalEntry],
        limit: Optional[int] = None,
    ) -> List[EquipmentUsage]:
        """
        Most used equipment names, by number of records.

        Sorted by count descending; equal counts keep the order in which
        the names were first seen. Truncated to `limit` (config default 5).
        """
        if limit is None:
            limit = self.config.equipment_top_n

        counts: Dict[str, int] = {}
        first_seen: Dict[str, int] = {}
        for entry in entries:
            for item in entry.equipment:
                name = item.name or self.config.unspecified_label
                if name not in first_seen:
                    first_seen[name] = len(first_seen)
                counts[name] = counts.get(name, 0) + 1

        ranked = sorted(counts, key=lambda n: (-counts[n], first_seen[n]))
        return [EquipmentUsage(name=n, value=counts[n]) for n in ranked[:limit]]

    def activity_trends(
        self, entries: Iterable[WorkJournalEntry]
    ) -> List[TrendPoint]:
        """One point per entry, ascending by date string. Same-date points keep input order."""
        points = [
            TrendPoint(
                date=e.date,
                workers=_worker_total(e),
                activities=len(e.activities),
                equipment=len(e.equipment),
            )
            for e in entries
        ]
        return sorted(points, key=lambda p: p.date)

    # --- Windows and summaries ---

    def within_range(
        self,
        entries: Iterable[WorkJournalEntry],
        time_range: TimeRange,
        today: Optional[date] = None,
    ) -> List[WorkJournalEntry]:
        """Entries dated within the window ending `today`, both ends included."""
        if time_range == TimeRange.ALL:
            return list(entries)
        today = today or date.today()
        start = (today - timedelta(days=RANGE_DAYS[time_range])).isoformat()
        end = today.isoformat()
        return [e for e in entries if start <= e.date <= end]

    def summarize(self, entry: WorkJournalEntry) -> EntrySummary:
        """Collapsed list row for an entry."""
        if entry.activities:
            headline = entry.activities[0].activity
        else:
            headline = self.config.no_activity_label
        return EntrySummary(
            id=entry.id,
            date=entry.date,
            headline=headline,
            worker_total=_worker_total(entry),
        )

    def compute(
        self,
        entries: Iterable[WorkJournalEntry],
        time_range: TimeRange = TimeRange.ALL,
        today: Optional[date] = None,
    ) -> JournalStatistics:
        """Compute the full statistics view, optionally over a date window."""
        selected = self.within_range(entries, time_range, today)
        logger.debug(
            "Computing statistics over %d entries (range=%s)",
            len(selected), time_range.value,
        )
        return JournalStatistics(
            time_range=time_range,
            has_data=bool(selected),
            total_entries=self.total_entries(selected),
            total_workers=self.total_workers(selected),
            total_equipment=self.total_equipment(selected),
            total_activities=self.total_activities(selected),
            workers_by_qualification=self.workers_by_qualification(selected),
            equipment_usage=self.equipment_usage(selected),
            activity_trends=self.activity_trends(selected),
        )
