"""
Entry Store — the session's work journal.

Written by: Draft submission
Read by: Search Engine + Aggregation Engine

Behavioral Contract:
- Newest entry first.
- Append-only. No entry is ever modified or removed.
- No uniqueness check on ids; callers generate them with uuid4.
"""

import logging
from typing import List, Optional, Tuple

from work_journal.models.entry import WorkJournalEntry

logger = logging.getLogger(__name__)


class EntryStore:
    """
    In-memory entry store. State lives for the process only.
    """

    def __init__(self):
        self._entries: List[WorkJournalEntry] = []

    def add_entry(self, entry: WorkJournalEntry) -> None:
        """Insert an entry at the front of the journal."""
        self._entries.insert(0, entry)
        logger.info("Entry for %s has been successfully added.", entry.date)

    def get_all(self) -> Tuple[WorkJournalEntry, ...]:
        """Snapshot of every entry, newest first."""
        return tuple(self._entries)

    def get(self, entry_id: str) -> Optional[WorkJournalEntry]:
        """Get a specific entry by ID."""
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def count(self) -> int:
        """Total number of entries."""
        return len(self._entries)
