"""Entry Draft — the form-side state before an entry is submitted."""

from datetime import date as date_type
from typing import List, Optional

from pydantic import BaseModel

from work_journal.models.entry import (
    Circumstance,
    Dispute,
    Equipment,
    Report,
    ServiceOrder,
    Supply,
    Variant,
    VerificationProcess,
    WorkActivity,
    Worker,
)


class EntryDraft(BaseModel):
    """
    Everything the user has typed so far. No id yet: one is generated when
    the draft is submitted.
    """

    date: Optional[date_type] = None        # None when no date was picked
    activities: List[WorkActivity] = []
    workers: List[Worker] = []
    equipment: List[Equipment] = []
    supplies: List[Supply] = []
    circumstances: List[Circumstance] = []
    service_orders: List[ServiceOrder] = []
    reports: List[Report] = []
    verifications: List[VerificationProcess] = []
    disputes: List[Dispute] = []
    variants: List[Variant] = []
