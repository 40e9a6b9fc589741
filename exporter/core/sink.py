"""The contract every event sink implements to take part in dispatch."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from exporter.core.models import EventBatch


class SinkConfigError(ValueError):
    """A sink could not be constructed from its configuration."""


class SinkNotRecognizedError(ValueError):
    """No sink is registered under the requested key."""


class EventSink(ABC):
    # Backend identifier, constant per sink kind
    name: ClassVar[str]

    @abstractmethod
    async def export_events(self, batch: EventBatch) -> None:
        """Deliver one batch. Failures are logged, never raised."""

    async def stop(self) -> None:
        """Release held resources. Must be idempotent."""
