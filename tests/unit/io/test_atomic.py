"""Tests for atomic file writes."""

import os
import stat
import sys
from pathlib import Path

import pytest

from ocx.io.atomic import write_text_atomic


def test_write_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "file.jsonc"

    write_text_atomic(target, "{}\n")

    assert target.read_text(encoding="utf-8") == "{}\n"


def test_write_replaces_existing_file(tmp_path: Path) -> None:
    target = tmp_path / "file.jsonc"
    target.write_text("old", encoding="utf-8")

    write_text_atomic(target, "new")

    assert target.read_text(encoding="utf-8") == "new"
    assert list(tmp_path.iterdir()) == [target]


def test_failed_write_leaves_no_temp_file(tmp_path: Path) -> None:
    target = tmp_path / "dir-in-the-way"
    target.mkdir()
    (target / "child").write_text("x", encoding="utf-8")

    with pytest.raises(OSError):
        write_text_atomic(target, "new")

    assert list(tmp_path.iterdir()) == [target]


def _umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")
@pytest.mark.parametrize("mode", [0o644, 0o640, 0o600])
def test_write_keeps_existing_permissions(tmp_path: Path, mode: int) -> None:
    target = tmp_path / "opencode.jsonc"
    target.write_text("{}", encoding="utf-8")
    os.chmod(target, mode)

    write_text_atomic(target, '{"a": 1}')

    assert stat.S_IMODE(target.stat().st_mode) == mode


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")
def test_new_file_follows_umask(tmp_path: Path) -> None:
    target = tmp_path / "opencode.jsonc"

    write_text_atomic(target, "{}")

    assert stat.S_IMODE(target.stat().st_mode) == 0o666 & ~_umask()
