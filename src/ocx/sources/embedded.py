"""Embedded registry items shipped as package data."""

from pathlib import Path
from typing import Any

import yaml

from ocx.exceptions import ItemNotFoundError
from ocx.io.manifest import load_registry_item
from ocx.models.registry_item import FetchedRegistryItem, RegistryItem
from ocx.sources.resolver import ManifestSource


def _data_dir() -> Path:
    return Path(__file__).parent.parent / "data"


def _load_registry_entries() -> list[dict[str, Any]]:
    """Load registry.yaml from package data."""
    registry_path = _data_dir() / "registry.yaml"

    with open(registry_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not data or "items" not in data:
        return []
    return list(data["items"])


def list_embedded_items() -> list[str]:
    """List embedded item names in declaration order."""
    return [entry["name"] for entry in _load_registry_entries()]


def _strip_namespace(spec: str) -> str:
    trimmed = spec.strip()
    return trimmed.split("/")[-1]


def _find_entry(entries: list[dict[str, Any]], spec: str) -> dict[str, Any] | None:
    name = _strip_namespace(spec)
    if not name:
        return None
    for entry in entries:
        if entry["name"] == name:
            return entry
    return None


def _build_item(entry: dict[str, Any]) -> RegistryItem:
    files = []
    for file_entry in entry.get("files", []):
        payload = _data_dir() / file_entry["source"]
        file_data = {"path": file_entry["path"], "content": payload.read_text(encoding="utf-8")}
        if "mode" in file_entry:
            file_data["mode"] = file_entry["mode"]
        files.append(file_data)

    raw: dict[str, Any] = {
        "schemaVersion": 1,
        "kind": entry["kind"],
        "name": entry["name"],
        "registryDependencies": entry.get("registryDependencies", []),
        "files": files,
    }
    for optional in ("description", "entry"):
        if optional in entry:
            raw[optional] = entry[optional]
    return load_registry_item(raw, f"embedded:{entry['name']}")


def get_embedded_registry_item(spec: str) -> RegistryItem | None:
    """Look up an embedded item by bare or namespaced name.

    Args:
        spec: "hello" or "<namespace>/hello"; only the last segment is matched

    Returns:
        The validated item, or None if no embedded item has that name
    """
    entry = _find_entry(_load_registry_entries(), spec)
    if entry is None:
        return None
    return _build_item(entry)


class EmbeddedManifestSource(ManifestSource):
    """Resolve items from the closed embedded registry.

    registry.yaml is read once, when the source is created.
    """

    def __init__(self) -> None:
        self._entries = _load_registry_entries()

    def can_resolve(self, spec: str) -> bool:
        return _find_entry(self._entries, spec) is not None

    def fetch(self, spec: str, cwd: Path) -> FetchedRegistryItem:
        entry = _find_entry(self._entries, spec)
        if entry is None:
            raise ItemNotFoundError(spec.strip())
        item = _build_item(entry)
        return FetchedRegistryItem(item=item, source=f"embedded:{item.kind}/{item.name}")
