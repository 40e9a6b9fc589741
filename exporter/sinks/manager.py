"""Sink manager: fans each event batch out to every configured sink."""

from __future__ import annotations

import asyncio
import logging
import time

from exporter.config import settings
from exporter.core.models import EventBatch
from exporter.core.sink import EventSink
from exporter.telemetry.metrics import sink_export_duration, sink_export_failures_total

logger = logging.getLogger("exporter.sinks")


class SinkManager:
    """Exports batches to all sinks concurrently, isolating their failures."""

    def __init__(self, sinks: list[EventSink], export_timeout: float | None = None) -> None:
        self._sinks = list(sinks)
        self._timeout = export_timeout if export_timeout is not None else settings.export_timeout_seconds

    @property
    def sinks(self) -> list[EventSink]:
        return list(self._sinks)

    async def export_events(self, batch: EventBatch) -> None:
        await asyncio.gather(*(self._export(sink, batch) for sink in self._sinks))

    async def _export(self, sink: EventSink, batch: EventBatch) -> None:
        start = time.perf_counter()
        try:
            await asyncio.wait_for(sink.export_events(batch), timeout=self._timeout)
        except asyncio.TimeoutError:
            logger.error("Export to %s sink timed out after %.1fs", sink.name, self._timeout)
            sink_export_failures_total.labels(sink=sink.name).inc()
        except Exception:
            logger.exception("Export to %s sink failed", sink.name)
            sink_export_failures_total.labels(sink=sink.name).inc()
        finally:
            sink_export_duration.labels(sink=sink.name).observe(time.perf_counter() - start)

    async def stop(self) -> None:
        for sink in self._sinks:
            try:
                await sink.stop()
            except Exception:
                logger.exception("Failed to stop %s sink", sink.name)
        logger.info("Sinks stopped: %d", len(self._sinks))
