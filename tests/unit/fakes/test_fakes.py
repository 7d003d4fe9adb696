"""Tests for the fake integrations used throughout the suite."""

from pathlib import Path

import pytest

from ocx.exceptions import FetchError
from ocx.integrations.http.fake import FakeHttpClient
from ocx.integrations.shell.fake import FakeShellRunner


def test_fake_http_serves_configured_bodies() -> None:
    http = FakeHttpClient({"https://a": "body", "https://b": (201, "created")})

    assert http.get_text("https://a") == "body"
    assert http.get_text("https://b") == "created"
    assert http.requested_urls == ["https://a", "https://b"]


def test_fake_http_unknown_url_is_404() -> None:
    http = FakeHttpClient()

    with pytest.raises(FetchError) as exc_info:
        http.get_text("https://missing")

    assert exc_info.value.status_code == 404
    assert http.requested_urls == ["https://missing"]


def test_fake_http_error_status() -> None:
    with pytest.raises(FetchError, match="503"):
        FakeHttpClient({"https://a": (503, "")}).get_text("https://a")


def test_fake_shell_records_calls() -> None:
    shell = FakeShellRunner(exit_codes={"fail": 7})

    assert shell.run("ok", Path("/x")) == 0
    assert shell.run("fail", Path("/y")) == 7
    assert shell.calls == [("ok", Path("/x")), ("fail", Path("/y"))]
