"""Prometheus metrics definitions."""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

http_request_duration = Histogram(
    "exporter_http_request_duration_seconds",
    "Duration of HTTP requests in seconds",
    labelnames=["method", "endpoint", "status_code"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

http_requests_total = Counter(
    "exporter_http_requests_total",
    "Total number of HTTP requests",
    labelnames=["method", "endpoint", "status_code"],
)

events_received_total = Counter(
    "exporter_events_received_total",
    "Events received for export",
)

sink_export_duration = Histogram(
    "exporter_sink_export_duration_seconds",
    "Time spent exporting one batch, per sink",
    labelnames=["sink"],
    buckets=(0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0, 10.0, 20.0),
)

sink_export_failures_total = Counter(
    "exporter_sink_export_failures_total",
    "Batch exports that raised or timed out, per sink",
    labelnames=["sink"],
)

alerts_sent_total = Counter(
    "exporter_alerts_sent_total",
    "Alerts delivered to Alertmanager",
)

alerts_suppressed_total = Counter(
    "exporter_alerts_suppressed_total",
    "Events not forwarded as alerts",
    labelnames=["reason"],
)

alert_delivery_failures_total = Counter(
    "exporter_alert_delivery_failures_total",
    "Alert batches dropped because delivery failed",
)

alerts_rejected_total = Counter(
    "exporter_alerts_rejected_total",
    "Alerts Alertmanager answered with a non-2xx status",
)

dedup_errors_total = Counter(
    "exporter_dedup_errors_total",
    "Dedup lookups that failed and were forwarded unchecked",
)


def get_metrics() -> tuple[bytes, str]:
    return generate_latest(), CONTENT_TYPE_LATEST
