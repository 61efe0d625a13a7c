"""Journal configuration."""

from pydantic import BaseModel, Field


class JournalConfig(BaseModel):
    """Configuration shared by the draft builder, aggregation engine and API."""

    unspecified_label: str = "Unspecified"
    no_activity_label: str = "No activity specified"
    equipment_top_n: int = Field(ge=1, default=5)
    worker_count_min: int = 1
    worker_count_max: int = 50
    enforce_worker_bounds: bool = True
    log_level: str = "INFO"
