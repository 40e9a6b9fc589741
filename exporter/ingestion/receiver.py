"""Event batch receiver: the collector pushes each collection cycle here."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request

from exporter.core.models import EventBatch
from exporter.telemetry.metrics import events_received_total

logger = logging.getLogger("exporter.ingestion")
router = APIRouter(prefix="/events", tags=["ingestion"])


@router.post("")
async def receive_events(batch: EventBatch, request: Request):
    """Dispatch one event batch to every configured sink."""
    manager = request.app.state.manager
    events_received_total.inc(len(batch.events))
    logger.info("Received batch of %d events", len(batch.events))

    await manager.export_events(batch)

    return {
        "received": len(batch.events),
        "sinks": [sink.name for sink in manager.sinks],
    }
