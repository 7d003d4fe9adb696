"""Install plan models.

Plans are derived from a resolved item and a config root without touching the
filesystem, and are consumed once by the install executor.
"""

from dataclasses import dataclass
from pathlib import Path

from ocx.constants import FileMode, ItemKind
from ocx.models.config_root import ConfigRoot
from ocx.models.installed import InstalledItemRecord


@dataclass(frozen=True)
class FileWrite:
    """A file to write, with an absolute destination inside the target dir."""

    path: Path
    content: str
    mode: FileMode | None = None


@dataclass(frozen=True)
class ConfigEdit:
    """An upsert of a single value at a JSON path in the config document."""

    json_path: tuple[str, ...]
    record: InstalledItemRecord


@dataclass(frozen=True)
class PostinstallPlan:
    """Postinstall commands with their cwd resolved against the config root."""

    commands: tuple[str, ...]
    cwd: Path


@dataclass(frozen=True)
class PlannedItem:
    """Identity and placement of the item a plan installs.

    dir_rel and entry_rel are "/"-joined and relative to the config root's
    root_dir for project installs, or to the config dir for global installs.
    """

    kind: ItemKind
    name: str
    source: str
    target_dir: Path
    dir_rel: str
    entry_rel: str

    @property
    def key(self) -> str:
        return f"{self.kind}/{self.name}"


@dataclass(frozen=True)
class InstallPlan:
    """Declarative description of installing one item."""

    config_root: ConfigRoot
    item: PlannedItem
    mkdirs: tuple[Path, ...]
    writes: tuple[FileWrite, ...]
    config_edits: tuple[ConfigEdit, ...]
    postinstall: PostinstallPlan | None


@dataclass(frozen=True)
class ApplyInstallResult:
    """Outcome of applying a set of install plans."""

    wrote_dirs: list[Path]
    edited_config_path: Path
    ran_postinstall: bool
