from __future__ import annotations

import logging

import pytest

from exporter.flags import SinkUri, parse_uris


class TestSinkUri:
    def test_bare_key(self):
        uri = SinkUri.parse("log")
        assert uri.key == "log"
        assert uri.value == ""
        assert str(uri) == "log"

    def test_splits_on_first_colon_only(self):
        uri = SinkUri.parse("alertmanager:http://am:9093/api/v1/alerts?cluster=prod")
        assert uri.key == "alertmanager"
        assert uri.value == "http://am:9093/api/v1/alerts?cluster=prod"

    def test_url_exposes_query(self):
        uri = SinkUri.parse("alertmanager:http://am:9093/api?cluster=prod&level=Warning")
        assert uri.url.host == "am"
        assert uri.url.params["cluster"] == "prod"
        assert uri.url.params["level"] == "Warning"

    def test_missing_key_rejected(self):
        with pytest.raises(ValueError):
            SinkUri.parse(":http://am")


class TestParseUris:
    def test_preserves_order_and_skips_blank(self):
        uris = parse_uris(["log", "  ", "alertmanager:?cluster=a"])
        assert [u.key for u in uris] == ["log", "alertmanager"]

    def test_malformed_entry_logged_and_skipped(self, caplog):
        with caplog.at_level(logging.ERROR, logger="exporter.flags"):
            uris = parse_uris([":nokey", "log"])
        assert [u.key for u in uris] == ["log"]
        assert "Ignoring sink spec" in caplog.text
