"""Application context with dependency injection.

The OcxContext dataclass holds all dependencies (HTTP client, shell runner,
directories) and is created once at the CLI entry point, then threaded
through commands via Click's context object.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from ocx.constants import DEFAULT_HTTP_TIMEOUT_SECONDS, HTTP_TIMEOUT_ENV_VAR
from ocx.integrations.http.abc import HttpClient
from ocx.integrations.shell.abc import ShellRunner
from ocx.sources import (
    EmbeddedManifestSource,
    FileManifestSource,
    ManifestResolver,
    UrlManifestSource,
)


@dataclass(frozen=True)
class OcxContext:
    """Immutable context holding all dependencies for ocx operations.

    Attributes:
        http: HTTP client for URL manifests
        shell: Runner for postinstall commands
        home_dir: Home directory holding the global config dirs
        cwd: Default working directory for config root discovery and file specs
        debug: Re-raise errors with full stack traces
    """

    http: HttpClient
    shell: ShellRunner
    home_dir: Path
    cwd: Path
    debug: bool

    def manifest_resolver(self) -> ManifestResolver:
        """Resolver consulting embedded items, then URLs, then file paths."""
        return ManifestResolver(
            sources=[
                EmbeddedManifestSource(),
                UrlManifestSource(self.http),
                FileManifestSource(),
            ]
        )

    @staticmethod
    def for_test(
        http: HttpClient | None = None,
        shell: ShellRunner | None = None,
        home_dir: Path | None = None,
        cwd: Path | None = None,
        debug: bool = False,
    ) -> "OcxContext":
        """Create test context with fakes for any unspecified integration.

        Args:
            http: Optional HttpClient. If None, creates an empty FakeHttpClient.
            shell: Optional ShellRunner. If None, creates FakeShellRunner.
            home_dir: Home directory (defaults to Path("/fake/home"))
            cwd: Working directory (defaults to Path("/fake/project"))
            debug: Whether to enable debug mode (default False)
        """
        from ocx.integrations.http.fake import FakeHttpClient
        from ocx.integrations.shell.fake import FakeShellRunner

        return OcxContext(
            http=http if http is not None else FakeHttpClient(),
            shell=shell if shell is not None else FakeShellRunner(),
            home_dir=home_dir if home_dir is not None else Path("/fake/home"),
            cwd=cwd if cwd is not None else Path("/fake/project"),
            debug=debug,
        )


def _http_timeout_from_env() -> float:
    raw = os.environ.get(HTTP_TIMEOUT_ENV_VAR)
    if raw is None or not raw.strip():
        return DEFAULT_HTTP_TIMEOUT_SECONDS
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{HTTP_TIMEOUT_ENV_VAR} must be a number of seconds: {raw!r}") from e


def create_context(*, debug: bool) -> OcxContext:
    """Create production context with real implementations.

    Called once at the CLI entry point.
    """
    from ocx.integrations.http.real import RealHttpClient
    from ocx.integrations.shell.real import RealShellRunner

    return OcxContext(
        http=RealHttpClient(timeout=_http_timeout_from_env()),
        shell=RealShellRunner(),
        home_dir=Path.home(),
        cwd=Path.cwd(),
        debug=debug,
    )
