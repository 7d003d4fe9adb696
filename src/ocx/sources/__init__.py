"""Manifest sources: embedded items, URLs, and local files."""

from ocx.sources.embedded import EmbeddedManifestSource as EmbeddedManifestSource
from ocx.sources.file import FileManifestSource as FileManifestSource
from ocx.sources.resolver import ManifestResolver as ManifestResolver
from ocx.sources.resolver import ManifestSource as ManifestSource
from ocx.sources.url import UrlManifestSource as UrlManifestSource
