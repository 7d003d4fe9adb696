"""HTTP(S) URL manifest source."""

from pathlib import Path

from ocx.integrations.http.abc import HttpClient
from ocx.io.manifest import load_registry_item_text
from ocx.models.registry_item import FetchedRegistryItem
from ocx.sources.resolver import ManifestSource


def is_probably_url(spec: str) -> bool:
    return spec.startswith("http://") or spec.startswith("https://")


class UrlManifestSource(ManifestSource):
    """Fetch manifests from absolute http:// and https:// URLs."""

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def can_resolve(self, spec: str) -> bool:
        return is_probably_url(spec)

    def fetch(self, spec: str, cwd: Path) -> FetchedRegistryItem:
        text = self._http.get_text(spec)
        item = load_registry_item_text(text, spec)
        return FetchedRegistryItem(item=item, source=spec)
