"""Manifest source interface and spec dispatch."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from ocx.exceptions import InvalidSpecError, ItemNotFoundError
from ocx.models.registry_item import FetchedRegistryItem

logger = logging.getLogger(__name__)


class ManifestSource(ABC):
    """Fetches registry item manifests for the specs it recognizes."""

    @abstractmethod
    def can_resolve(self, spec: str) -> bool:
        """Check if this source recognizes the (trimmed) spec."""
        ...

    @abstractmethod
    def fetch(self, spec: str, cwd: Path) -> FetchedRegistryItem:
        """Fetch and validate the manifest for a spec this source recognizes."""
        ...


class ManifestResolver:
    """Dispatch a spec to the first source that recognizes it.

    Sources are consulted in the order given, so the order is the priority:
    embedded items, then URLs, then file paths.
    """

    def __init__(self, sources: list[ManifestSource]) -> None:
        self.sources = sources

    def fetch_registry_item(self, spec: str, cwd: Path) -> FetchedRegistryItem:
        """Fetch the registry item a spec refers to.

        Args:
            spec: Embedded name (optionally namespaced), URL, or manifest path
            cwd: Directory relative file specs are resolved against

        Raises:
            InvalidSpecError: If the spec is empty or whitespace
            ItemNotFoundError: If no source recognizes the spec
        """
        trimmed = spec.strip()
        if not trimmed:
            raise InvalidSpecError(spec)

        for source in self.sources:
            if source.can_resolve(trimmed):
                fetched = source.fetch(trimmed, cwd)
                logger.debug("Fetched %s from %s", fetched.key, fetched.source)
                return fetched

        raise ItemNotFoundError(trimmed)
