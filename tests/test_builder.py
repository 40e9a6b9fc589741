from __future__ import annotations

import pytest

from exporter.core.models import Event
from exporter.sinks.alertmanager.builder import (
    InvalidAlertError,
    create_alert_from_event,
    fingerprint,
)
from exporter.sinks.alertmanager.models import NORMAL, WARNING, get_level


class TestGetLevel:
    def test_known_types(self):
        assert get_level("Warning") == WARNING == 2
        assert get_level("Normal") == NORMAL == 1

    def test_unknown_and_case_sensitive(self):
        assert get_level("warning") == 0
        assert get_level("") == 0
        assert get_level("Critical") == 0


class TestCreateAlert:
    def test_full_label_set(self, make_event):
        alert = create_alert_from_event("demo", make_event())
        assert alert.labels == {
            "alertname": "OOMKilled",
            "group": "KUBE-SYSTEM",
            "level": "Warning",
            "instance": "pod-a",
            "reason": "Evicted",
            "cluster": "demo",
        }
        assert alert.annotations == {}

    def test_empty_optional_fields_are_omitted(self, make_event):
        alert = create_alert_from_event("demo", make_event(reason="", namespace="", name="", type=""))
        assert alert.labels == {"alertname": "OOMKilled", "cluster": "demo"}
        assert "reason" not in alert.labels

    def test_empty_message_fails(self, make_event):
        with pytest.raises(InvalidAlertError):
            create_alert_from_event("demo", make_event(message=""))

    def test_empty_cluster_fails(self, make_event):
        with pytest.raises(InvalidAlertError):
            create_alert_from_event("", make_event())


class TestFingerprint:
    def test_deterministic(self, make_event):
        assert fingerprint(make_event()) == fingerprint(make_event())

    def test_ignores_non_identity_fields(self, make_event):
        assert fingerprint(make_event(count=1)) == fingerprint(make_event(count=7))

    @pytest.mark.parametrize("field", ["type", "reason", "message", "namespace", "name"])
    def test_each_identity_field_counts(self, make_event, field):
        assert fingerprint(make_event()) != fingerprint(make_event(**{field: "other"}))

    def test_field_boundaries_are_unambiguous(self):
        a = Event(type="Warning", namespace="ab", name="c", message="m", reason="r")
        b = Event(type="Warning", namespace="a", name="bc", message="m", reason="r")
        assert fingerprint(a) != fingerprint(b)
