"""Registry item manifest parsing.

Manifests arrive as untyped JSON. parse_registry_item() turns them into a
RegistryItem or a list of field-level violations; it never coerces a bad
shape into a best-effort item.
"""

import json
from dataclasses import dataclass
from typing import Literal

from pydantic import ValidationError

from ocx.exceptions import ManifestValidationError, ManifestViolation
from ocx.models.registry_item import RegistryItem

_VALUE_ERROR_PREFIX = "Value error, "


@dataclass(frozen=True)
class ManifestParseSuccess:
    """Success result with the validated item."""

    success: Literal[True]
    item: RegistryItem


@dataclass(frozen=True)
class ManifestParseError:
    """Error result listing every violation found."""

    success: Literal[False]
    violations: tuple[ManifestViolation, ...]


def _format_location(loc: tuple[int | str, ...]) -> str:
    """Render a pydantic error location as a field path like files[0].mode."""
    if not loc:
        return "manifest"

    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            parts.append(f"[{segment}]")
        elif parts:
            parts.append(f".{segment}")
        else:
            parts.append(segment)
    return "".join(parts)


def _violations_from(error: ValidationError) -> tuple[ManifestViolation, ...]:
    violations = []
    for detail in error.errors():
        message = detail["msg"]
        if message.startswith(_VALUE_ERROR_PREFIX):
            message = message[len(_VALUE_ERROR_PREFIX) :]
        violations.append(ManifestViolation(field=_format_location(detail["loc"]), message=message))
    return tuple(violations)


def parse_registry_item(raw: object) -> ManifestParseSuccess | ManifestParseError:
    """Validate decoded manifest JSON against schema version 1.

    Args:
        raw: Decoded JSON value

    Returns:
        ManifestParseSuccess with the item, or ManifestParseError naming each
        offending field (wire names, e.g. "registryDependencies[1]")
    """
    if not isinstance(raw, dict):
        return ManifestParseError(
            success=False,
            violations=(ManifestViolation(field="manifest", message="expected a JSON object"),),
        )

    try:
        item = RegistryItem.model_validate(raw)
    except ValidationError as e:
        return ManifestParseError(success=False, violations=_violations_from(e))

    return ManifestParseSuccess(success=True, item=item)


def load_registry_item(raw: object, origin: str) -> RegistryItem:
    """Validate decoded manifest JSON, raising on any violation.

    Args:
        raw: Decoded JSON value
        origin: Spec, URL, or path used in the error message

    Raises:
        ManifestValidationError: If the manifest fails validation
    """
    result = parse_registry_item(raw)
    if isinstance(result, ManifestParseError):
        raise ManifestValidationError(origin, result.violations)
    return result.item


def load_registry_item_text(text: str, origin: str) -> RegistryItem:
    """Decode manifest JSON text and validate it.

    Raises:
        ManifestValidationError: If the text is not JSON or fails validation
    """
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise ManifestValidationError(
            origin, (ManifestViolation(field="manifest", message=f"invalid JSON: {e}"),)
        ) from e
    return load_registry_item(raw, origin)
