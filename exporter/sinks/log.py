"""Log sink: writes every batch to the exporter log."""

from __future__ import annotations

import logging

from exporter.core.models import EventBatch
from exporter.core.sink import EventSink
from exporter.flags import SinkUri

logger = logging.getLogger("exporter.sinks.log")

LOG_SINK = "log"


def batch_to_string(batch: EventBatch) -> str:
    lines = [f"EventBatch     Timestamp: {batch.timestamp.isoformat()}"]
    for event in batch.events:
        ts = event.last_timestamp.isoformat() if event.last_timestamp else "-"
        lines.append(f"   {ts} (cnt:{event.count}): {event.message}")
    return "\n".join(lines)


class LogSink(EventSink):
    name = LOG_SINK

    @classmethod
    def from_uri(cls, uri: SinkUri) -> LogSink:
        return cls()

    async def export_events(self, batch: EventBatch) -> None:
        logger.info(batch_to_string(batch))
