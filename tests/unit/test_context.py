"""Tests for context construction."""

from pathlib import Path

import pytest

from ocx.context import OcxContext, create_context
from ocx.integrations.http.fake import FakeHttpClient
from ocx.integrations.http.real import RealHttpClient
from ocx.integrations.shell.fake import FakeShellRunner
from ocx.integrations.shell.real import RealShellRunner
from ocx.sources import EmbeddedManifestSource, FileManifestSource, UrlManifestSource


def test_for_test_defaults_to_fakes() -> None:
    ctx = OcxContext.for_test()

    assert isinstance(ctx.http, FakeHttpClient)
    assert isinstance(ctx.shell, FakeShellRunner)
    assert ctx.home_dir == Path("/fake/home")
    assert ctx.cwd == Path("/fake/project")
    assert ctx.debug is False


def test_resolver_source_priority() -> None:
    sources = OcxContext.for_test().manifest_resolver().sources

    assert [type(s) for s in sources] == [
        EmbeddedManifestSource,
        UrlManifestSource,
        FileManifestSource,
    ]


def test_create_context_uses_real_integrations(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OCX_HTTP_TIMEOUT", raising=False)

    ctx = create_context(debug=True)

    assert isinstance(ctx.http, RealHttpClient)
    assert isinstance(ctx.shell, RealShellRunner)
    assert ctx.home_dir == Path.home()
    assert ctx.debug is True


def test_invalid_timeout_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OCX_HTTP_TIMEOUT", "soon")

    with pytest.raises(ValueError, match="OCX_HTTP_TIMEOUT"):
        create_context(debug=False)
