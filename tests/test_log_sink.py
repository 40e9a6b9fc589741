from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone

from exporter.core.models import Event, EventBatch
from exporter.sinks.log import LogSink, batch_to_string

_TS = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def test_batch_to_string():
    batch = EventBatch(
        timestamp=_TS,
        events=[
            Event(message="Back-off restarting failed container", count=3, lastTimestamp=_TS),
            Event(message="Scheduled"),
        ],
    )
    text = batch_to_string(batch)

    assert text.splitlines() == [
        "EventBatch     Timestamp: 2026-10-19T12:00:00+00:00",
        "   2026-10-19T12:00:00+00:00 (cnt:3): Back-off restarting failed container",
        "   - (cnt:1): Scheduled",
    ]


def test_export_logs_batch(caplog):
    batch = EventBatch(timestamp=_TS, events=[Event(message="Killing container")])
    with caplog.at_level(logging.INFO, logger="exporter.sinks.log"):
        asyncio.run(LogSink().export_events(batch))

    assert "Killing container" in caplog.text


def test_event_accepts_kubernetes_field_names():
    event = Event.model_validate({"type": "Warning", "firstTimestamp": "2026-10-19T12:00:00Z"})
    assert event.first_timestamp == _TS
