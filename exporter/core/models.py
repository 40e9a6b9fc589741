"""Data models for cluster events and the batches handed to sinks."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field

EVENT_TYPE_NORMAL = "Normal"
EVENT_TYPE_WARNING = "Warning"


class Event(BaseModel):
    """A single cluster event, flattened from the Kubernetes Event object."""

    model_config = {"frozen": True, "populate_by_name": True}

    type: str = ""
    reason: str = ""
    message: str = ""
    namespace: str = ""
    name: str = ""
    first_timestamp: datetime | None = Field(alias="firstTimestamp", default=None)
    last_timestamp: datetime | None = Field(alias="lastTimestamp", default=None)
    count: int = 1


class EventBatch(BaseModel):
    """Events observed in one collection cycle."""

    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    events: list[Event] = []
