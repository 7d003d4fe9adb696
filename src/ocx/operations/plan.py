"""Install planning.

Turns resolved items into declarative InstallPlans. Pure: nothing here reads
or writes the filesystem.
"""

import os
import posixpath
from pathlib import Path, PureWindowsPath

from ocx.constants import CONFIG_DIR_NAME, DEFAULT_ENTRY, MANAGED_CONFIG_KEY, ItemKind
from ocx.exceptions import PathTraversalError
from ocx.models.config_root import ConfigRoot
from ocx.models.installed import InstalledItemRecord
from ocx.models.plan import (
    ConfigEdit,
    FileWrite,
    InstallPlan,
    PlannedItem,
    PostinstallPlan,
)
from ocx.models.registry_item import FetchedRegistryItem


def normalize_registry_relative_path(path: str) -> str:
    """Normalize a manifest path and ensure it stays inside its item directory.

    Backslashes are treated as separators so Windows-style escapes are caught.

    Args:
        path: Path as written in the manifest

    Returns:
        "/"-separated normalized relative path without a leading "./"

    Raises:
        PathTraversalError: If the path is empty, absolute, or escapes upward
    """
    if not path.strip():
        raise PathTraversalError(path, "Registry file path cannot be empty")

    candidate = path.replace("\\", "/")
    if posixpath.isabs(candidate) or PureWindowsPath(path).drive:
        raise PathTraversalError(path, "Registry file path must be relative")

    normalized = posixpath.normpath(candidate)
    if normalized == ".." or normalized.startswith("../"):
        raise PathTraversalError(path, "Registry file path cannot escape target dir")
    if normalized == ".":
        raise PathTraversalError(path, "Registry file path cannot be empty")

    return normalized


def validate_item_name(name: str) -> None:
    """Ensure an item name is a single safe path segment.

    Raises:
        PathTraversalError: If the name contains separators or is "." or ".."
    """
    if "/" in name or "\\" in name or name in (".", "..") or PureWindowsPath(name).drive:
        raise PathTraversalError(name, "Registry item name must be a single path segment")


def compute_dir_rel(config_root: ConfigRoot, kind: ItemKind, name: str) -> str:
    """Item directory as persisted in config.

    Project installs are relative to the project root (".opencode/tool/x");
    global installs are relative to the config dir ("tool/x").
    """
    parts = [CONFIG_DIR_NAME, kind, name] if config_root.kind == "project" else [kind, name]
    return "/".join(parts)


def _plan_one(fetched: FetchedRegistryItem, config_root: ConfigRoot) -> InstallPlan:
    item = fetched.item
    validate_item_name(item.name)

    kind_dir = config_root.config_dir / item.kind
    target_dir = kind_dir / item.name

    dir_rel = compute_dir_rel(config_root, item.kind, item.name)
    entry_file = normalize_registry_relative_path(
        item.entry if item.entry is not None else DEFAULT_ENTRY
    )
    entry_rel = f"{dir_rel}/{entry_file}"

    mkdirs: dict[Path, None] = dict.fromkeys([config_root.config_dir, kind_dir, target_dir])
    writes: list[FileWrite] = []
    for file in item.files:
        rel = normalize_registry_relative_path(file.path)
        dest = target_dir.joinpath(*rel.split("/"))
        mkdirs[dest.parent] = None
        writes.append(FileWrite(path=dest, content=file.content, mode=file.mode))

    postinstall: PostinstallPlan | None = None
    if item.postinstall is not None:
        cwd_rel = item.postinstall.cwd if item.postinstall.cwd is not None else "."
        postinstall = PostinstallPlan(
            commands=tuple(item.postinstall.commands),
            cwd=Path(os.path.abspath(config_root.root_dir / cwd_rel)),
        )

    record = InstalledItemRecord(
        source=fetched.source,
        dir=dir_rel,
        entry=entry_rel,
        postinstall_commands=postinstall.commands if postinstall is not None else None,
        postinstall_cwd=str(postinstall.cwd) if postinstall is not None else None,
    )

    return InstallPlan(
        config_root=config_root,
        item=PlannedItem(
            kind=item.kind,
            name=item.name,
            source=fetched.source,
            target_dir=target_dir,
            dir_rel=dir_rel,
            entry_rel=entry_rel,
        ),
        mkdirs=tuple(mkdirs),
        writes=tuple(writes),
        config_edits=(
            ConfigEdit(
                json_path=(MANAGED_CONFIG_KEY, "items", item.kind, item.name),
                record=record,
            ),
        ),
        postinstall=postinstall,
    )


def plan_installs(
    resolved: list[FetchedRegistryItem], config_root: ConfigRoot
) -> list[InstallPlan]:
    """Build one install plan per resolved item, preserving order.

    Args:
        resolved: Items in installation order
        config_root: Root every plan targets

    Returns:
        Plans in the same order as resolved

    Raises:
        PathTraversalError: If any file path, entry, or item name would escape
            the item's own directory
    """
    return [_plan_one(fetched, config_root) for fetched in resolved]
