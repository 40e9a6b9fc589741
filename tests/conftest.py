"""Shared fixtures for event exporter tests."""

from __future__ import annotations

import json

import httpx
import pytest

from exporter.core.models import Event, EventBatch


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingTransport(httpx.MockTransport):
    """Mock transport that keeps every request and its decoded JSON body."""

    def __init__(self, status_code: int = 200, error: Exception | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self._status_code = status_code
        self._error = error
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        return httpx.Response(self._status_code, json={"status": "success"})

    @property
    def payloads(self) -> list:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def make_event():
    def _make(
        *,
        type: str = "Warning",
        reason: str = "Evicted",
        message: str = "OOMKilled",
        namespace: str = "kube-system",
        name: str = "pod-a",
        count: int = 1,
    ) -> Event:
        return Event(
            type=type,
            reason=reason,
            message=message,
            namespace=namespace,
            name=name,
            count=count,
        )

    return _make


@pytest.fixture
def make_batch():
    def _make(*events: Event) -> EventBatch:
        return EventBatch(events=list(events))

    return _make


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def make_transport():
    return RecordingTransport
