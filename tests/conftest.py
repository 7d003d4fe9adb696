"""Shared fixtures for ocx tests."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from ocx.integrations.http.fake import FakeHttpClient
from ocx.integrations.shell.fake import FakeShellRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    """An empty home directory, separate from the project."""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """An empty project directory without a .opencode marker."""
    project = tmp_path / "project"
    project.mkdir()
    return project


@pytest.fixture
def fake_http() -> FakeHttpClient:
    return FakeHttpClient()


@pytest.fixture
def fake_shell() -> FakeShellRunner:
    return FakeShellRunner()
