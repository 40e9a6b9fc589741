"""Translate cluster events into Alertmanager alerts."""

from __future__ import annotations

import hashlib

from exporter.core.models import Event
from exporter.sinks.alertmanager.models import Alert

ALERT_NAME_LABEL = "alertname"
ALERT_CLUSTER_LABEL = "cluster"
ALERT_GROUP_LABEL = "group"
ALERT_LEVEL_LABEL = "level"
ALERT_INSTANCE_LABEL = "instance"
ALERT_REASON_LABEL = "reason"


class InvalidAlertError(ValueError):
    """The event cannot be turned into an alert."""


def fingerprint(event: Event) -> str:
    """Stable identity of an event for dedup.

    Each field is length-prefixed so ("ab", "c") and ("a", "bc") differ.
    """
    fields = (event.type, event.namespace, event.name, event.message, event.reason)
    key = "".join(f"{len(f)}:{f}" for f in fields)
    return hashlib.sha256(key.encode("utf-8")).hexdigest()


def create_alert_from_event(cluster: str, event: Event) -> Alert:
    if not event.message:
        raise InvalidAlertError("event has no message to use as alert name")
    if not cluster:
        raise InvalidAlertError("cluster label is required")

    labels = {ALERT_NAME_LABEL: event.message}
    if event.namespace:
        labels[ALERT_GROUP_LABEL] = event.namespace.upper()
    if event.type:
        labels[ALERT_LEVEL_LABEL] = event.type
    if event.name:
        labels[ALERT_INSTANCE_LABEL] = event.name
    if event.reason:
        labels[ALERT_REASON_LABEL] = event.reason
    labels[ALERT_CLUSTER_LABEL] = cluster

    return Alert(labels=labels)
