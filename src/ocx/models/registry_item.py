"""Pydantic models for registry item manifests (schema version 1)."""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

from ocx.constants import FileMode, ItemKind

SUPPORTED_SCHEMA_VERSION = 1


def _reject_null(v: Any) -> Any:
    """Optional manifest fields may be omitted but never set to null."""
    if v is None:
        raise ValueError("must be omitted rather than null")
    return v


class RegistryFile(BaseModel):
    """A file shipped by a registry item, relative to the item directory."""

    model_config = ConfigDict(frozen=True)

    path: StrictStr = Field(..., min_length=1)
    content: StrictStr
    mode: FileMode | None = None

    @field_validator("mode", mode="before")
    @classmethod
    def reject_null_mode(cls, v: Any) -> Any:
        return _reject_null(v)


class PostinstallSpec(BaseModel):
    """Shell commands to run after an item is committed."""

    model_config = ConfigDict(frozen=True)

    commands: list[StrictStr]
    cwd: StrictStr | None = None

    @field_validator("cwd", mode="before")
    @classmethod
    def reject_null_cwd(cls, v: Any) -> Any:
        return _reject_null(v)


class RegistryItem(BaseModel):
    """A registry item manifest.

    Field names follow the wire format through aliases (schemaVersion,
    registryDependencies); populate_by_name allows snake_case construction.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    schema_version: StrictInt = Field(..., alias="schemaVersion")
    kind: ItemKind
    name: StrictStr
    description: StrictStr | None = None
    registry_dependencies: list[StrictStr] = Field(
        default_factory=list, alias="registryDependencies"
    )
    files: list[RegistryFile]
    entry: StrictStr | None = None
    postinstall: PostinstallSpec | None = None

    @field_validator("description", "entry", "postinstall", mode="before")
    @classmethod
    def reject_null_optionals(cls, v: Any) -> Any:
        return _reject_null(v)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: int) -> int:
        """Only schema version 1 is understood."""
        if v != SUPPORTED_SCHEMA_VERSION:
            raise ValueError(
                f"unsupported schemaVersion {v} (expected {SUPPORTED_SCHEMA_VERSION})"
            )
        return v

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name is non-empty string."""
        if not v or not v.strip():
            raise ValueError("name must be a non-empty string")
        return v

    @property
    def key(self) -> str:
        """Identity key: kind/name."""
        return f"{self.kind}/{self.name}"


@dataclass(frozen=True)
class FetchedRegistryItem:
    """A registry item together with where it came from.

    source is "embedded:<kind>/<name>", a URL, or an absolute file path.
    """

    item: RegistryItem
    source: str

    @property
    def key(self) -> str:
        return self.item.key
