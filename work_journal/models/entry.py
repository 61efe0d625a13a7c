"""Work Journal Entry — one day's record in the Giornale dei Lavori."""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict


class JournalSection(BaseModel):
    """Base for every entry section. Sections are immutable once built."""

    # Section instances nested in an entry are re-checked, not trusted
    model_config = ConfigDict(frozen=True, revalidate_instances="always")


class WorkActivity(JournalSection):
    order: str
    mode: str
    activity: str


class Worker(JournalSection):
    """Workers of one qualification on site that day."""

    qualification: str
    count: int                              # Bounds are checked at draft submission, not here


class Equipment(JournalSection):
    name: str
    description: str


class Supply(JournalSection):
    name: str
    invoice: str
    details: str


class Circumstance(JournalSection):
    """Site conditions affecting the works (weather, terrain, ...)."""

    description: str
    weather: str
    terrain: str
    notes: str = ""


class ServiceOrder(JournalSection):
    order_number: str
    description: str
    issued_by: str


class Report(JournalSection):
    recipient: str
    subject: str
    date: str                               # Free form, never parsed


class VerificationProcess(JournalSection):
    type: str
    description: str


class DisputeType(str, Enum):
    CONTESTATION = "contestation"
    SUSPENSION = "suspension"
    RESUMPTION = "resumption"


class Dispute(JournalSection):
    type: DisputeType
    description: str
    date: str


class Variant(JournalSection):
    description: str
    price_changes: str


class WorkJournalEntry(JournalSection):
    """
    The aggregate root. One per submitted day.

    `date` is always "YYYY-MM-DD" (or empty when no date was chosen) and is
    only ever compared as a string.
    """

    id: str
    date: str

    # BASE SECTIONS
    activities: List[WorkActivity] = []
    workers: List[Worker] = []
    equipment: List[Equipment] = []
    supplies: List[Supply] = []
    circumstances: List[Circumstance] = []
    service_orders: List[ServiceOrder] = []

    # ADVANCED SECTIONS
    reports: List[Report] = []
    verifications: List[VerificationProcess] = []
    disputes: List[Dispute] = []
    variants: List[Variant] = []
