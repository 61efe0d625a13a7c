"""Work Journal data models."""

from work_journal.models.config import JournalConfig
from work_journal.models.draft import EntryDraft
from work_journal.models.entry import (
    Circumstance,
    Dispute,
    DisputeType,
    Equipment,
    Report,
    ServiceOrder,
    Supply,
    Variant,
    VerificationProcess,
    WorkActivity,
    Worker,
    WorkJournalEntry,
)
from work_journal.models.stats import (
    EntrySummary,
    EquipmentUsage,
    JournalStatistics,
    TimeRange,
    TrendPoint,
)

__all__ = [
    "Circumstance",
    "Dispute",
    "DisputeType",
    "EntryDraft",
    "EntrySummary",
    "Equipment",
    "EquipmentUsage",
    "JournalConfig",
    "JournalStatistics",
    "Report",
    "ServiceOrder",
    "Supply",
    "TimeRange",
    "TrendPoint",
    "Variant",
    "VerificationProcess",
    "WorkActivity",
    "Worker",
    "WorkJournalEntry",
]
