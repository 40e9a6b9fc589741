"""Sink factory: a registration table from sink key to constructor."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Mapping

from exporter.core.sink import EventSink, SinkNotRecognizedError
from exporter.flags import SinkUri
from exporter.sinks.alertmanager.sink import ALERTMANAGER_SINK, AlertmanagerSink
from exporter.sinks.log import LOG_SINK, LogSink

logger = logging.getLogger("exporter.sinks")

SinkBuilder = Callable[[SinkUri], EventSink]


def default_builders() -> dict[str, SinkBuilder]:
    return {
        LOG_SINK: LogSink.from_uri,
        ALERTMANAGER_SINK: AlertmanagerSink.from_uri,
    }


class SinkFactory:
    def __init__(self, builders: Mapping[str, SinkBuilder] | None = None) -> None:
        self._builders: dict[str, SinkBuilder] = dict(
            default_builders() if builders is None else builders
        )

    def register(self, key: str, builder: SinkBuilder) -> None:
        """Add or replace the constructor for ``key``. Call before building."""
        self._builders[key] = builder

    @property
    def keys(self) -> list[str]:
        return sorted(self._builders)

    def build(self, uri: SinkUri) -> EventSink:
        """Construct the sink for one spec.

        Raises SinkNotRecognizedError for an unknown key and lets the
        backend's SinkConfigError through.
        """
        builder = self._builders.get(uri.key)
        if builder is None:
            raise SinkNotRecognizedError(f"Sink not recognized: {uri.key}")
        return builder(uri)

    def build_all(self, uris: Iterable[SinkUri]) -> list[EventSink]:
        sinks = []
        for uri in uris:
            try:
                sink = self.build(uri)
            except Exception as exc:
                logger.error("Failed to create %s sink: %s", uri, exc)
                continue
            logger.info("Sink created: %s", sink.name)
            sinks.append(sink)
        return sinks
