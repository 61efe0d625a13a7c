"""
Work Journal API — FastAPI endpoints.

Exposes the journal core via a REST API for:
- Entry submission
- Entry listing and search
- Journal statistics
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Query

from work_journal.drafts.builder import DraftValidationError, submit_entry
from work_journal.logging_config import setup_logging
from work_journal.models.config import JournalConfig
from work_journal.models.draft import EntryDraft
from work_journal.models.stats import TimeRange
from work_journal.search.engine import SearchEngine
from work_journal.stats.engine import AggregationEngine
from work_journal.store.store import EntryStore


# --- Application Factory ---

def create_app(
    store: Optional[EntryStore] = None,
    config: Optional[JournalConfig] = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""

    cfg = config or JournalConfig()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(level=cfg.log_level)
        yield

    app = FastAPI(
        title="Work Journal API",
        description="Giornale dei Lavori — DM n. 49 del 07/03/2018, Art. 14",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Initialize components
    es = store or EntryStore()
    search = SearchEngine()
    stats = AggregationEngine(cfg)

    app.state.store = es
    app.state.config = cfg
    app.state.search = search
    app.state.stats = stats

    # === ENTRIES ===

    @app.post("/entries")
    def create_entry(draft: EntryDraft):
        """Submit a completed draft."""
        try:
            entry = submit_entry(draft, es, cfg)
        except DraftValidationError as exc:
            raise HTTPException(422, str(exc))
        return entry.model_dump(mode="json")

    @app.get("/entries")
    def list_entries(q: str = ""):
        """Entries matching the search query, newest first."""
        entries = search.filter(es.get_all(), q)
        return [e.model_dump(mode="json") for e in entries]

    @app.get("/entries/summaries")
    def list_entry_summaries(q: str = ""):
        """Collapsed list rows for the matching entries."""
        entries = search.filter(es.get_all(), q)
        return [stats.summarize(e).model_dump(mode="json") for e in entries]

    @app.get("/entries/{entry_id}")
    def get_entry(entry_id: str):
        """Get a specific entry."""
        entry = es.get(entry_id)
        if not entry:
            raise HTTPException(404, "Entry not found")
        return entry.model_dump(mode="json")

    # === STATISTICS ===

    @app.get("/stats")
    def get_statistics(time_range: TimeRange = Query(TimeRange.ALL, alias="range")):
        """Full statistics view."""
        return stats.compute(es.get_all(), time_range=time_range).model_dump(mode="json")

    @app.get("/stats/workers")
    def get_workers_by_qualification():
        """Head count per qualification."""
        return stats.workers_by_qualification(es.get_all())

    @app.get("/stats/equipment")
    def get_equipment_usage(limit: Optional[int] = Query(None, ge=1)):
        """Most used equipment."""
        usage = stats.equipment_usage(es.get_all(), limit=limit)
        return [u.model_dump(mode="json") for u in usage]

    @app.get("/stats/trends")
    def get_activity_trends():
        """Per-entry totals in date order."""
        return [p.model_dump(mode="json") for p in stats.activity_trends(es.get_all())]

    # === CONFIG ===

    @app.get("/config")
    def get_config():
        """Current journal configuration."""
        return cfg.model_dump()

    return app


# Default application instance
app = create_app()
