"""Structured JSON logging, optionally shipped over OTLP."""

import logging
import sys

from opentelemetry.exporter.otlp.proto.grpc._log_exporter import OTLPLogExporter
from opentelemetry.sdk._logs import LoggerProvider, LoggingHandler
from opentelemetry.sdk._logs.export import BatchLogRecordProcessor
from opentelemetry.sdk.resources import Resource

SERVICE_NAME = "event-exporter"
SERVICE_VERSION = "1.0.0"

_JSON_FORMAT = (
    '{"timestamp":"%(asctime)s","level":"%(levelname)s",'
    '"logger":"%(name)s","message":"%(message)s",'
    '"trace_id":"%(otelTraceID)s","span_id":"%(otelSpanID)s",'
    '"service":"%(otelServiceName)s"}'
)

_UVICORN_FORMAT = (
    '{"timestamp":"%(asctime)s","level":"%(levelname)s",'
    '"logger":"%(name)s","message":"%(message)s"}'
)

_OTEL_DEFAULTS = {
    "otelTraceID": "0",
    "otelSpanID": "0",
    "otelServiceName": SERVICE_NAME,
}


class _SafeOtelFormatter(logging.Formatter):
    """Formatter that injects OTEL fields with safe defaults for non-instrumented loggers."""

    def format(self, record: logging.LogRecord) -> str:
        for key, default in _OTEL_DEFAULTS.items():
            if not hasattr(record, key):
                setattr(record, key, default)
        return super().format(record)


def setup_logging(level: str | int = logging.INFO, otlp_endpoint: str = "") -> logging.Logger:
    logger = logging.getLogger("exporter")
    logger.setLevel(level)
    logger.handlers.clear()

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(_SafeOtelFormatter(_JSON_FORMAT))
    logger.addHandler(stream_handler)

    if otlp_endpoint:
        resource = Resource.create(
            {
                "service.name": SERVICE_NAME,
                "service.version": SERVICE_VERSION,
            }
        )
        log_provider = LoggerProvider(resource=resource)
        otlp_exporter = OTLPLogExporter(endpoint=otlp_endpoint, insecure=True)
        log_provider.add_log_record_processor(BatchLogRecordProcessor(otlp_exporter))
        logger.addHandler(LoggingHandler(level=level, logger_provider=log_provider))

    uvicorn_handler = logging.StreamHandler(sys.stdout)
    uvicorn_handler.setFormatter(logging.Formatter(_UVICORN_FORMAT))
    logging.getLogger("uvicorn.access").handlers = [uvicorn_handler]
    logging.getLogger("uvicorn.error").handlers = [uvicorn_handler]

    return logger
