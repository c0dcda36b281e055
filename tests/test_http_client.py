"""Tests for the API session wrapper and custom header parsing."""

import pytest

from utils.errors import ValidationError
from utils.http_client import DashboardSession, parse_custom_headers


class TestParseCustomHeaders:
    @pytest.mark.parametrize("raw", [None, "", "   ", "{}"])
    def test_blank_or_empty_object(self, raw):
        assert parse_custom_headers(raw) == {}

    def test_values_stringified(self):
        assert parse_custom_headers('{"X-Org": "svp", "X-Version": 2}') == {
            "X-Org": "svp",
            "X-Version": "2",
        }

    def test_invalid_json(self):
        with pytest.raises(ValidationError):
            parse_custom_headers("{not json")

    def test_non_object_json(self):
        with pytest.raises(ValidationError):
            parse_custom_headers('["a", "b"]')


class TestDashboardSession:
    def test_default_headers(self):
        with DashboardSession() as http:
            assert http.session.headers["Accept"] == "application/json"
            assert "Authorization" not in http.session.headers

    def test_api_key_becomes_bearer_token(self):
        with DashboardSession(api_key="secret") as http:
            assert http.session.headers["Authorization"] == "Bearer secret"

    def test_custom_headers_applied(self):
        with DashboardSession(headers={"X-Org": "svp"}) as http:
            assert http.session.headers["X-Org"] == "svp"

    def test_no_retries_mounted(self):
        with DashboardSession() as http:
            adapter = http.session.get_adapter("https://example.org")
            assert adapter.max_retries.total == 0

    def test_get_passes_timeout(self, monkeypatch):
        calls = {}

        def fake_get(url, **kwargs):
            calls["url"] = url
            calls["kwargs"] = kwargs
            return "response"

        with DashboardSession(timeout=7.5) as http:
            monkeypatch.setattr(http.session, "get", fake_get)
            assert http.get("https://example.org/data") == "response"

        assert calls["url"] == "https://example.org/data"
        assert calls["kwargs"]["timeout"] == 7.5
