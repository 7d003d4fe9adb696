"""Tests for RealHttpClient with httpx responses stubbed at the call site."""

from typing import Any

import httpx
import pytest

from ocx.exceptions import FetchError
from ocx.integrations.http.real import RealHttpClient

URL = "https://registry.example.com/item.json"


def _stub_get(monkeypatch: pytest.MonkeyPatch, handler: Any) -> list[dict[str, Any]]:
    calls: list[dict[str, Any]] = []

    def fake_get(url: str, **kwargs: Any) -> httpx.Response:
        calls.append({"url": url, **kwargs})
        return handler(url)

    monkeypatch.setattr(httpx, "get", fake_get)
    return calls


def test_returns_body_on_success(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = _stub_get(
        monkeypatch, lambda url: httpx.Response(200, text="{}", request=httpx.Request("GET", url))
    )

    assert RealHttpClient(timeout=5.0).get_text(URL) == "{}"
    assert calls == [{"url": URL, "follow_redirects": True, "timeout": 5.0}]


def test_error_status_raises_fetch_error(monkeypatch: pytest.MonkeyPatch) -> None:
    _stub_get(monkeypatch, lambda url: httpx.Response(404, request=httpx.Request("GET", url)))

    with pytest.raises(FetchError) as exc_info:
        RealHttpClient().get_text(URL)

    assert exc_info.value.status_code == 404
    assert str(exc_info.value) == f"Failed to fetch registry item: {URL} (404)"


def test_transport_error_raises_fetch_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def fail(url: str) -> httpx.Response:
        raise httpx.ConnectError("connection refused")

    _stub_get(monkeypatch, fail)

    with pytest.raises(FetchError, match="connection refused"):
        RealHttpClient().get_text(URL)
