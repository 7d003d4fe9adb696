"""Tests for config root discovery."""

from pathlib import Path

from ocx.operations.config_root import (
    find_nearest_project_root,
    global_config_dirs,
    is_inside_dir,
    resolve_config_root,
)


def test_is_inside_dir_respects_separator_boundary() -> None:
    assert is_inside_dir(Path("/a/b"), Path("/a/b"))
    assert is_inside_dir(Path("/a/b/c"), Path("/a/b"))
    assert is_inside_dir(Path("/a/b/c/../d"), Path("/a/b"))
    assert not is_inside_dir(Path("/a/bc"), Path("/a/b"))
    assert not is_inside_dir(Path("/a/b/../c"), Path("/a/b"))


def test_is_inside_root_dir() -> None:
    assert is_inside_dir(Path("/a"), Path("/"))


def test_global_config_dirs_order(home_dir: Path) -> None:
    assert global_config_dirs(home_dir) == [
        home_dir / ".config" / "opencode",
        home_dir / ".opencode",
    ]


def test_cwd_inside_xdg_global_dir(home_dir: Path) -> None:
    global_dir = home_dir / ".config" / "opencode"
    cwd = global_dir / "tool"
    cwd.mkdir(parents=True)

    root = resolve_config_root(cwd, home_dir)

    assert root.kind == "global"
    assert root.root_dir == global_dir
    assert root.config_dir == global_dir
    assert root.config_path == global_dir / "opencode.jsonc"


def test_cwd_inside_legacy_global_dir(home_dir: Path) -> None:
    root = resolve_config_root(home_dir / ".opencode", home_dir)

    assert root.kind == "global"
    assert root.config_dir == home_dir / ".opencode"


def test_sibling_with_global_prefix_is_not_global(home_dir: Path) -> None:
    cwd = home_dir / ".opencode-other"
    cwd.mkdir()

    root = resolve_config_root(cwd, home_dir)

    assert root.kind == "project"
    assert root.root_dir == cwd


def test_nearest_ancestor_with_marker_wins(project_dir: Path, home_dir: Path) -> None:
    (project_dir / ".opencode").mkdir()
    nested = project_dir / "packages" / "app"
    (nested / ".opencode").mkdir(parents=True)
    cwd = nested / "src"
    cwd.mkdir()

    root = resolve_config_root(cwd, home_dir)

    assert root.kind == "project"
    assert root.root_dir == nested
    assert root.config_dir == nested / ".opencode"
    assert root.config_path == nested / ".opencode" / "opencode.jsonc"


def test_marker_must_be_a_directory(project_dir: Path) -> None:
    cwd = project_dir / "sub"
    cwd.mkdir()
    (cwd / ".opencode").write_text("not a dir", encoding="utf-8")
    (project_dir / ".opencode").mkdir()

    assert find_nearest_project_root(cwd) == project_dir


def test_falls_back_to_cwd_without_marker(project_dir: Path, home_dir: Path) -> None:
    root = resolve_config_root(project_dir, home_dir)

    assert root.kind == "project"
    assert root.root_dir == project_dir
    assert root.config_dir == project_dir / ".opencode"
