"""Local file manifest source."""

import os
from pathlib import Path

from ocx.exceptions import ManifestReadError
from ocx.io.manifest import load_registry_item_text
from ocx.models.registry_item import FetchedRegistryItem
from ocx.sources.resolver import ManifestSource


def looks_like_file_path(spec: str) -> bool:
    return (
        spec.startswith("/")
        or spec.startswith("./")
        or spec.startswith("../")
        or spec.endswith(".json")
    )


class FileManifestSource(ManifestSource):
    """Read manifests from JSON files, resolving relative paths against cwd."""

    def can_resolve(self, spec: str) -> bool:
        return looks_like_file_path(spec)

    def fetch(self, spec: str, cwd: Path) -> FetchedRegistryItem:
        spec_path = Path(spec)
        resolved = Path(os.path.abspath(spec_path if spec_path.is_absolute() else cwd / spec_path))

        try:
            text = resolved.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ManifestReadError(resolved, str(e)) from e

        item = load_registry_item_text(text, str(resolved))
        return FetchedRegistryItem(item=item, source=str(resolved))
