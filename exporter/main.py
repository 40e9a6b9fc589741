"""Event Exporter: FastAPI service entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from functools import partial

from fastapi import FastAPI
from starlette.responses import Response

from exporter.config import settings
from exporter.flags import parse_uris
from exporter.ingestion.receiver import router as events_router
from exporter.middleware import MetricsMiddleware
from exporter.queue.redis_client import close_redis, get_redis
from exporter.sinks.alertmanager.dedup import RedisDedupCache
from exporter.sinks.alertmanager.sink import ALERTMANAGER_SINK, AlertmanagerSink
from exporter.sinks.factory import SinkFactory
from exporter.sinks.manager import SinkManager
from exporter.telemetry.logging import setup_logging
from exporter.telemetry.metrics import get_metrics

logger = logging.getLogger("exporter")


def build_factory() -> SinkFactory:
    """Default factory; alert dedup moves to Redis when one is configured."""
    factory = SinkFactory()
    if settings.redis_url:
        dedup = RedisDedupCache(get_redis(), window_seconds=settings.dedup_window_seconds)
        factory.register(ALERTMANAGER_SINK, partial(AlertmanagerSink.from_uri, dedup=dedup))
        logger.info("Alert dedup backed by Redis: %s", settings.redis_url)
    return factory


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(level=settings.log_level, otlp_endpoint=settings.otlp_endpoint)
    logger.info("Initializing Event Exporter...")

    if settings.redis_url:
        await get_redis().ping()
        logger.info("Redis connected: %s", settings.redis_url)

    factory = build_factory()
    sinks = factory.build_all(parse_uris(settings.sinks))
    if not sinks:
        logger.warning("No sinks configured, events will be dropped")

    app.state.manager = SinkManager(sinks)
    logger.info(
        "Event Exporter ready, sinks=%s listening on %s:%d",
        [sink.name for sink in sinks], settings.host, settings.port,
    )

    yield

    await app.state.manager.stop()
    await close_redis()
    logger.info("Event Exporter shut down")


app = FastAPI(
    title="Event Exporter",
    description="Forwards cluster events to pluggable sinks",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(MetricsMiddleware)
app.include_router(events_router)


@app.get("/health")
async def health():
    manager: SinkManager | None = getattr(app.state, "manager", None)
    return {
        "status": "healthy",
        "sinks": [sink.name for sink in manager.sinks] if manager else [],
    }


@app.get("/metrics", include_in_schema=False)
async def metrics():
    body, content_type = get_metrics()
    return Response(content=body, media_type=content_type)
