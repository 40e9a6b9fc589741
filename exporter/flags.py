"""Sink specifications in ``key:value`` form, e.g. ``alertmanager:http://host/path?cluster=x``."""

from __future__ import annotations

import logging

import httpx
from pydantic import BaseModel

logger = logging.getLogger("exporter.flags")


class SinkUri(BaseModel):
    model_config = {"frozen": True}

    key: str
    value: str = ""

    @classmethod
    def parse(cls, raw: str) -> SinkUri:
        key, _, value = raw.strip().partition(":")
        if not key:
            raise ValueError(f"Missing sink key in {raw!r}")
        return cls(key=key, value=value)

    @property
    def url(self) -> httpx.URL:
        return httpx.URL(self.value)

    def __str__(self) -> str:
        return f"{self.key}:{self.value}" if self.value else self.key


def parse_uris(raw: list[str]) -> list[SinkUri]:
    """Parse sink specs in order, skipping blank and malformed entries."""
    uris = []
    for item in raw:
        if not item.strip():
            continue
        try:
            uris.append(SinkUri.parse(item))
        except ValueError as exc:
            logger.error("Ignoring sink spec: %s", exc)
    return uris
