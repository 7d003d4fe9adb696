"""Config root model."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from ocx.constants import CONFIG_FILE_NAME

ConfigRootKind = Literal["project", "global"]


@dataclass(frozen=True)
class ConfigRoot:
    """Directory pair under which items and the config document live.

    Attributes:
        kind: "project" (nearest ancestor with .opencode) or "global" (home config dir)
        root_dir: Project root, or the global config dir itself
        config_dir: Directory holding installed items and the config document
        config_path: Always config_dir / opencode.jsonc
    """

    kind: ConfigRootKind
    root_dir: Path
    config_dir: Path
    config_path: Path

    @staticmethod
    def create(kind: ConfigRootKind, root_dir: Path, config_dir: Path) -> "ConfigRoot":
        """Build a ConfigRoot, deriving config_path from config_dir."""
        return ConfigRoot(
            kind=kind,
            root_dir=root_dir,
            config_dir=config_dir,
            config_path=config_dir / CONFIG_FILE_NAME,
        )
