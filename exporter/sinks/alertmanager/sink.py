"""Alertmanager sink: filter, dedup and forward warning events as alerts."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from exporter.config import settings
from exporter.core.models import Event, EventBatch
from exporter.core.sink import EventSink, SinkConfigError
from exporter.flags import SinkUri
from exporter.sinks.alertmanager.builder import (
    InvalidAlertError,
    create_alert_from_event,
    fingerprint,
)
from exporter.sinks.alertmanager.dedup import DedupCache, MemoryDedupCache
from exporter.sinks.alertmanager.models import (
    DEFAULT_IGNORE_REASONS,
    WARNING,
    Alert,
    AlertmanagerConfig,
    get_level,
)
from exporter.telemetry.metrics import (
    alert_delivery_failures_total,
    alerts_rejected_total,
    alerts_sent_total,
    alerts_suppressed_total,
    dedup_errors_total,
)

logger = logging.getLogger("exporter.sinks.alertmanager")

ALERTMANAGER_SINK = "alertmanager"


def config_from_uri(uri: httpx.URL) -> AlertmanagerConfig:
    """Read endpoint, cluster, level and ignore list from a sink URI."""
    params = uri.params

    cluster = params.get("cluster", "")
    if not cluster:
        raise SinkConfigError("you must provide a cluster name")

    endpoint = ""
    if uri.host:
        endpoint = uri.netloc.decode("ascii") + uri.path

    ignore = [r for value in params.get_list("ignore") for r in value.split(",") if r]

    try:
        return AlertmanagerConfig(
            endpoint=endpoint,
            cluster=cluster,
            level=get_level(params["level"]) if "level" in params else WARNING,
            ignore_reasons=tuple(ignore) if ignore else DEFAULT_IGNORE_REASONS,
        )
    except ValidationError as exc:
        raise SinkConfigError(str(exc)) from exc


class AlertmanagerSink(EventSink):
    name = ALERTMANAGER_SINK

    def __init__(
        self,
        config: AlertmanagerConfig,
        dedup: DedupCache | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self._dedup = dedup if dedup is not None else MemoryDedupCache(
            window_seconds=settings.dedup_window_seconds,
            max_entries=settings.dedup_max_entries,
        )
        self._transport = transport
        if not config.endpoint:
            logger.warning("Alertmanager sink has no endpoint, deliveries will fail")

    @classmethod
    def from_uri(
        cls,
        uri: SinkUri,
        dedup: DedupCache | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> AlertmanagerSink:
        return cls(config_from_uri(uri.url), dedup=dedup, transport=transport)

    @property
    def url(self) -> str:
        return f"http://{self.config.endpoint}"

    async def export_events(self, batch: EventBatch) -> None:
        alerts: list[Alert] = []
        for event in batch.events:
            if not self.is_event_level_dangerous(event.type):
                alerts_suppressed_total.labels(reason="level").inc()
                continue

            if self.is_ignored(event):
                logger.info("Skip alert for ignored reason: reason=%s name=%s", event.reason, event.name)
                alerts_suppressed_total.labels(reason="ignored").inc()
                continue

            if not await self.is_first_sighting(event):
                logger.info(
                    "Skip alert, already sent within the dedup window: reason=%s name=%s",
                    event.reason, event.name,
                )
                alerts_suppressed_total.labels(reason="duplicate").inc()
                continue

            try:
                alert = create_alert_from_event(self.config.cluster, event)
            except InvalidAlertError as exc:
                logger.warning("Failed to create alert from event %s/%s: %s", event.namespace, event.name, exc)
                alerts_suppressed_total.labels(reason="invalid").inc()
                continue

            alerts.append(alert)

        if alerts:
            await self.send(alerts)

    def is_event_level_dangerous(self, level: str) -> bool:
        return get_level(level) >= self.config.level

    def is_ignored(self, event: Event) -> bool:
        return event.reason in self.config.ignore_reasons

    async def is_first_sighting(self, event: Event) -> bool:
        """Admit the event through the dedup cache.

        An unreachable cache fails open and the alert is forwarded.
        """
        try:
            return await self._dedup.admit(fingerprint(event))
        except Exception:
            logger.exception("Dedup cache unavailable, forwarding alert: reason=%s name=%s", event.reason, event.name)
            dedup_errors_total.inc()
            return True

    async def send(self, alerts: list[Alert]) -> None:
        """POST the alerts as one JSON array. Failures are logged and dropped."""
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                resp = await client.post(self.url, json=[alert.model_dump() for alert in alerts])
        except httpx.HTTPError as exc:
            logger.error("Failed to send %d alerts to %s: %s", len(alerts), self.url, exc)
            alert_delivery_failures_total.inc()
            return

        if resp.is_error:
            logger.warning("Alertmanager rejected %d alerts with status %d", len(alerts), resp.status_code)
            alerts_rejected_total.inc(len(alerts))
            return

        alerts_sent_total.inc(len(alerts))
        logger.info("Alerts sent: count=%d endpoint=%s", len(alerts), self.config.endpoint)
