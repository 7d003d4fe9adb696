"""Tests for the local file manifest source."""

from pathlib import Path

import pytest

from ocx.exceptions import ManifestReadError, ManifestValidationError
from ocx.sources.file import FileManifestSource, looks_like_file_path
from tests.test_utils.manifests import manifest, write_manifest


@pytest.mark.parametrize(
    ("spec", "expected"),
    [
        ("/abs/item", True),
        ("./rel", True),
        ("../up", True),
        ("item.json", True),
        ("dir/item.json", True),
        ("item", False),
        ("dir/item", False),
    ],
)
def test_looks_like_file_path(spec: str, expected: bool) -> None:
    assert looks_like_file_path(spec) is expected


def test_relative_path_is_resolved_and_normalized(tmp_path: Path) -> None:
    write_manifest(tmp_path / "m", "w.json", manifest("w"))
    cwd = tmp_path / "work"
    cwd.mkdir()

    fetched = FileManifestSource().fetch("../m/./w.json", cwd)

    assert fetched.source == str(tmp_path / "m" / "w.json")
    assert fetched.key == "tool/w"


def test_absolute_path_ignores_cwd(tmp_path: Path) -> None:
    path = write_manifest(tmp_path, "w.json", manifest("w"))

    fetched = FileManifestSource().fetch(str(path), Path("/elsewhere"))

    assert fetched.source == str(path)


def test_missing_file_raises_read_error(tmp_path: Path) -> None:
    with pytest.raises(ManifestReadError, match="missing.json"):
        FileManifestSource().fetch("missing.json", tmp_path)


def test_invalid_manifest_raises_validation_error(tmp_path: Path) -> None:
    write_manifest(tmp_path, "bad.json", {"schemaVersion": 1, "kind": "widget"})

    with pytest.raises(ManifestValidationError, match="kind"):
        FileManifestSource().fetch("bad.json", tmp_path)
