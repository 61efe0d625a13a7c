"""
Draft Builder — the form's side of entry creation.

Section rows are edited through pure list operations that always return a
new list. `submit_entry` turns a finished draft into a WorkJournalEntry and
hands it to the Entry Store.
"""

import logging
from datetime import date
from typing import List, Optional, TypeVar
from uuid import uuid4

from pydantic import BaseModel

from work_journal.models.config import JournalConfig
from work_journal.models.draft import EntryDraft
from work_journal.models.entry import (
    Circumstance,
    Equipment,
    ServiceOrder,
    Supply,
    WorkActivity,
    Worker,
    WorkJournalEntry,
)
from work_journal.store.store import EntryStore

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class DraftValidationError(Exception):
    """Raised when a draft cannot be turned into an entry."""
    pass


# --- Immutable list edits ---

def replace_item(items: List[T], index: int, **changes) -> List[T]:
    """
    Return a new list with the item at `index` rebuilt with `changes`.
    The rebuilt item is validated, so bad values raise ValidationError.
    """
    if not 0 <= index < len(items):
        raise IndexError(f"No item at index {index} (have {len(items)})")
    return [
        type(item).model_validate({**item.model_dump(), **changes}) if i == index else item
        for i, item in enumerate(items)
    ]


def append_item(items: List[T], template: T) -> List[T]:
    """Return a new list with a copy of `template` appended."""
    return [*items, template.model_copy()]


def remove_item(items: List[T], index: int) -> List[T]:
    """Return a new list without the item at `index`."""
    if not 0 <= index < len(items):
        raise IndexError(f"No item at index {index} (have {len(items)})")
    return [item for i, item in enumerate(items) if i != index]


# --- Drafts ---

def new_draft(today: Optional[date] = None) -> EntryDraft:
    """A fresh form: one blank row per base section, no advanced sections."""
    return EntryDraft(
        date=today or date.today(),
        activities=[WorkActivity(order="", mode="", activity="")],
        workers=[Worker(qualification="", count=1)],
        equipment=[Equipment(name="", description="")],
        supplies=[Supply(name="", invoice="", details="")],
        circumstances=[Circumstance(description="", weather="", terrain="", notes="")],
        service_orders=[ServiceOrder(order_number="", description="", issued_by="")],
    )


def validate_workers(workers: List[Worker], config: JournalConfig) -> None:
    """Check worker counts against the configured bounds."""
    if not config.enforce_worker_bounds:
        return
    for i, worker in enumerate(workers):
        if not config.worker_count_min <= worker.count <= config.worker_count_max:
            raise DraftValidationError(
                f"Worker row {i} ({worker.qualification or config.unspecified_label}): "
                f"count {worker.count} outside "
                f"{config.worker_count_min}-{config.worker_count_max}"
            )


def build_entry(draft: EntryDraft) -> WorkJournalEntry:
    """
    Assign an id and format the date. Every section is re-validated, so a
    value that bypassed pydantic raises ValidationError here. Worker bounds
    are not checked.
    """
    return WorkJournalEntry(
        id=str(uuid4()),
        date=draft.date.isoformat() if draft.date else "",
        activities=draft.activities,
        workers=draft.workers,
        equipment=draft.equipment,
        supplies=draft.supplies,
        circumstances=draft.circumstances,
        service_orders=draft.service_orders,
        reports=draft.reports,
        verifications=draft.verifications,
        disputes=draft.disputes,
        variants=draft.variants,
    )


def submit_entry(
    draft: EntryDraft,
    store: EntryStore,
    config: Optional[JournalConfig] = None,
) -> WorkJournalEntry:
    """
    Build the entry from a draft, check it and add it to the store.
    Raises ValidationError for invalid section values and
    DraftValidationError if a worker count is out of bounds.
    """
    config = config or JournalConfig()
    entry = build_entry(draft)
    try:
        validate_workers(entry.workers, config)
    except DraftValidationError as exc:
        logger.warning("Rejected draft: %s", exc)
        raise
    store.add_entry(entry)
    return entry
