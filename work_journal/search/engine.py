"""
Search Engine — free-text filtering of the journal list.

Only date, activities, worker qualifications and equipment are searched.
Supplies, circumstances, service orders and the advanced sections never
contribute a match.
"""

from typing import Iterable, List

from work_journal.models.entry import WorkJournalEntry


class SearchEngine:
    """Case-insensitive substring search over journal entries."""

    def filter(
        self, entries: Iterable[WorkJournalEntry], query: str
    ) -> List[WorkJournalEntry]:
        """
        Return the entries matching `query`, in their original order.
        An empty query matches everything.
        """
        if not query:
            return list(entries)
        needle = query.lower()
        return [e for e in entries if self._matches_lowered(e, needle)]

    def matches(self, entry: WorkJournalEntry, query: str) -> bool:
        """Check whether a single entry matches `query`."""
        return self._matches_lowered(entry, query.lower())

    def _matches_lowered(self, entry: WorkJournalEntry, needle: str) -> bool:
        if needle in entry.date.lower():
            return True

        if any(
            needle in a.order.lower()
            or needle in a.mode.lower()
            or needle in a.activity.lower()
            for a in entry.activities
        ):
            return True

        if any(needle in w.qualification.lower() for w in entry.workers):
            return True

        return any(
            needle in e.name.lower() or needle in e.description.lower()
            for e in entry.equipment
        )
