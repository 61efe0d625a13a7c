"""Derived, read-only statistics over the journal."""

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel


class TimeRange(str, Enum):
    ALL = "all"
    WEEK = "week"       # Last 7 days
    MONTH = "month"     # Last 30 days


class EquipmentUsage(BaseModel):
    name: str
    value: int                              # Number of equipment records with this name


class TrendPoint(BaseModel):
    """Per-entry totals, one bar in the activity trend chart."""

    date: str
    workers: int
    activities: int
    equipment: int


class EntrySummary(BaseModel):
    """Collapsed list row: the date, the headline activity and the head count."""

    id: str
    date: str
    headline: str
    worker_total: int


class JournalStatistics(BaseModel):
    """Everything the statistics view renders, computed in one pass."""

    time_range: TimeRange = TimeRange.ALL
    has_data: bool
    total_entries: int
    total_workers: int
    total_equipment: int
    total_activities: int
    workers_by_qualification: Dict[str, int] = {}
    equipment_usage: List[EquipmentUsage] = []
    activity_trends: List[TrendPoint] = []
