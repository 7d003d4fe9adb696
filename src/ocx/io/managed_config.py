"""Reading and rewriting the ocx-managed section of opencode.jsonc.

The managed section lives under the top-level "ocx" property:

    "ocx": {"items": {"tool": {"<name>": {...}}, "agent": {...}, ...}}

It is owned by ocx and rewritten wholesale on every install. A malformed
existing section is discarded rather than treated as fatal.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ocx.constants import ITEM_KINDS, MANAGED_CONFIG_KEY
from ocx.exceptions import ConfigDocumentError
from ocx.io import jsonc
from ocx.io.atomic import write_text_atomic
from ocx.models.plan import InstallPlan

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ManagedConfig:
    """Managed item records keyed by kind, then by name."""

    items: dict[str, dict[str, Any]]

    def to_json(self) -> dict[str, Any]:
        return {"items": {kind: dict(self.items[kind]) for kind in ITEM_KINDS}}


def empty_managed_config() -> ManagedConfig:
    return ManagedConfig(items={kind: {} for kind in ITEM_KINDS})


def read_config_text(config_path: Path) -> str:
    """Read the config document, treating a missing or unreadable file as empty."""
    try:
        return config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Treating config %s as empty: %s", config_path, e)
        return ""


def parse_managed_config(config_text: str, config_path: Path | None = None) -> ManagedConfig:
    """Extract the managed section from a config document.

    Args:
        config_text: Full JSONC document text
        config_path: Used in error messages only

    Returns:
        ManagedConfig with one record map per known kind. Missing, malformed,
        or type-mismatched sections yield empty maps.

    Raises:
        ConfigDocumentError: If the document itself is not a JSONC object
    """
    try:
        value_text = jsonc.get_top_level_property_value_text(config_text, MANAGED_CONFIG_KEY)
    except jsonc.JsoncSyntaxError as e:
        raise ConfigDocumentError(config_path, str(e)) from e

    if value_text is None:
        return empty_managed_config()

    try:
        parsed = jsonc.loads(value_text)
    except (jsonc.JsoncSyntaxError, json.JSONDecodeError) as e:
        logger.debug("Discarding malformed %r section: %s", MANAGED_CONFIG_KEY, e)
        return empty_managed_config()

    if not isinstance(parsed, dict):
        return empty_managed_config()

    items_raw = parsed.get("items")
    if not isinstance(items_raw, dict):
        items_raw = {}

    items: dict[str, dict[str, Any]] = {}
    for kind in ITEM_KINDS:
        records = items_raw.get(kind)
        items[kind] = dict(records) if isinstance(records, dict) else {}
    return ManagedConfig(items=items)


def merge_install_plans(managed: ManagedConfig, plans: list[InstallPlan]) -> ManagedConfig:
    """Return a new ManagedConfig with each plan's record replacing any previous one."""
    items = {kind: dict(records) for kind, records in managed.items.items()}
    for plan in plans:
        for edit in plan.config_edits:
            _, _, kind, name = edit.json_path
            items.setdefault(kind, {})[name] = edit.record.to_json()
    return ManagedConfig(items=items)


def write_managed_config(config_path: Path, config_text: str, managed: ManagedConfig) -> None:
    """Upsert the managed section into the document and write it atomically."""
    try:
        updated = jsonc.upsert_top_level_property(
            config_text, MANAGED_CONFIG_KEY, managed.to_json()
        )
    except jsonc.JsoncSyntaxError as e:
        raise ConfigDocumentError(config_path, str(e)) from e

    write_text_atomic(config_path, updated)
    logger.debug("Wrote config %s", config_path)
