"""Alertmanager sink configuration and the alert wire model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from exporter.core.models import EVENT_TYPE_NORMAL, EVENT_TYPE_WARNING

WARNING = 2
NORMAL = 1

DEFAULT_IGNORE_REASONS = ("Unhealthy",)

_LEVEL_SCORES = {
    EVENT_TYPE_WARNING: WARNING,
    EVENT_TYPE_NORMAL: NORMAL,
}


def get_level(level: str) -> int:
    """Severity score of an event type. Unknown types score 0."""
    return _LEVEL_SCORES.get(level, 0)


class Alert(BaseModel):
    """A generic representation of an alert in the Prometheus ecosystem."""

    model_config = {"frozen": True}

    # Must minimally include "alertname" and "cluster"
    labels: dict[str, str]
    # Extra information which does not define alert identity
    annotations: dict[str, str] = {}


class AlertmanagerConfig(BaseModel):
    model_config = {"frozen": True}

    endpoint: str = ""
    cluster: str = Field(min_length=1)
    level: int = WARNING
    ignore_reasons: tuple[str, ...] = DEFAULT_IGNORE_REASONS
