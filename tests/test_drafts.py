"""Tests for the Draft Builder."""

import re
from datetime import date

import pytest
from pydantic import ValidationError

from work_journal.drafts.builder import (
    DraftValidationError,
    append_item,
    build_entry,
    new_draft,
    remove_item,
    replace_item,
    submit_entry,
)
from work_journal.models.config import JournalConfig
from work_journal.models.draft import EntryDraft
from work_journal.models.entry import Dispute, DisputeType, WorkActivity, Worker
from work_journal.store.store import EntryStore

UUID_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[0-9a-f]{4}-[0-9a-f]{12}$")


class TestListEdits:
    def setup_method(self):
        self.workers = [
            Worker(qualification="Mason", count=1),
            Worker(qualification="Electrician", count=2),
        ]

    def test_replace_item_returns_new_list(self):
        updated = replace_item(self.workers, 1, count=7)
        assert updated[1].count == 7
        assert updated[1].qualification == "Electrician"
        assert updated[0] is self.workers[0]
        assert self.workers[1].count == 2  # Original untouched

    def test_replace_item_bad_index(self):
        with pytest.raises(IndexError):
            replace_item(self.workers, 5, count=1)

    def test_replace_item_rejects_unknown_dispute_type(self):
        disputes = [Dispute(type=DisputeType.SUSPENSION, description="Rain", date="2024-03-02")]
        with pytest.raises(ValidationError):
            replace_item(disputes, 0, type="bogus")
        assert disputes[0].type == DisputeType.SUSPENSION

    def test_replace_item_coerces_like_construction(self):
        updated = replace_item(self.workers, 0, count="3")
        assert updated[0].count == 3
        assert isinstance(updated[0].count, int)

    def test_replace_item_rejects_non_numeric_count(self):
        with pytest.raises(ValidationError):
            replace_item(self.workers, 0, count="three")

    def test_append_item_copies_template(self):
        template = Worker(qualification="", count=1)
        updated = append_item(self.workers, template)
        assert len(updated) == 3
        assert len(self.workers) == 2
        assert updated[2] == template

    def test_remove_item(self):
        updated = remove_item(self.workers, 0)
        assert [w.qualification for w in updated] == ["Electrician"]
        assert len(self.workers) == 2

    def test_remove_item_bad_index(self):
        with pytest.raises(IndexError):
            remove_item(self.workers, -1)


class TestNewDraft:
    def test_one_blank_row_per_base_section(self):
        draft = new_draft(today=date(2024, 3, 1))
        assert draft.date == date(2024, 3, 1)
        assert len(draft.activities) == 1
        assert draft.workers == [Worker(qualification="", count=1)]
        assert len(draft.equipment) == 1
        assert len(draft.supplies) == 1
        assert len(draft.circumstances) == 1
        assert len(draft.service_orders) == 1
        assert draft.reports == []
        assert draft.verifications == []
        assert draft.disputes == []
        assert draft.variants == []


class TestSubmitEntry:
    def setup_method(self):
        self.store = EntryStore()

    def test_submit_builds_and_stores(self):
        draft = EntryDraft(
            date=date(2024, 3, 1),
            activities=[WorkActivity(order="O1", mode="manual", activity="excavation")],
            workers=[Worker(qualification="Mason", count=3)],
            disputes=[Dispute(type=DisputeType.CONTESTATION, description="x", date="2024-03-01")],
        )
        entry = submit_entry(draft, self.store)

        assert UUID_RE.match(entry.id)
        assert entry.date == "2024-03-01"
        assert entry.workers == draft.workers
        assert entry.disputes[0].type == DisputeType.CONTESTATION
        assert self.store.get_all() == (entry,)

    def test_missing_date_becomes_empty_string(self):
        entry = build_entry(EntryDraft())
        assert entry.date == ""

    def test_ids_are_unique(self):
        ids = {submit_entry(new_draft(), self.store).id for _ in range(50)}
        assert len(ids) == 50

    def test_worker_count_out_of_bounds(self):
        draft = EntryDraft(workers=[Worker(qualification="Mason", count=51)])
        with pytest.raises(DraftValidationError):
            submit_entry(draft, self.store)
        assert self.store.count() == 0

    def test_worker_count_zero_rejected(self):
        draft = EntryDraft(workers=[Worker(qualification="Mason", count=0)])
        with pytest.raises(DraftValidationError):
            submit_entry(draft, self.store)

    def test_unvalidated_section_never_reaches_store(self):
        bad = Dispute(type=DisputeType.SUSPENSION, description="x", date="2024-03-01")
        bad = bad.model_copy(update={"type": "bogus"})  # Bypasses validation
        draft = EntryDraft(date=date(2024, 3, 1))
        draft.disputes = [bad]
        with pytest.raises(ValidationError):
            submit_entry(draft, self.store)
        assert self.store.count() == 0

    def test_unvalidated_worker_count_raises_validation_error(self):
        bad = Worker(qualification="Mason", count=1).model_copy(update={"count": "lots"})
        draft = EntryDraft(date=date(2024, 3, 1))
        draft.workers = [bad]
        with pytest.raises(ValidationError):
            submit_entry(draft, self.store)
        assert self.store.count() == 0

    def test_bounds_can_be_disabled(self):
        config = JournalConfig(enforce_worker_bounds=False)
        draft = EntryDraft(workers=[Worker(qualification="Mason", count=120)])
        entry = submit_entry(draft, self.store, config)
        assert entry.workers[0].count == 120
