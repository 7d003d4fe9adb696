"""Persisted record of an installed item."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class InstalledItemRecord:
    """One entry under ocx.items.<kind>.<name> in the config document.

    Records are replaced wholesale on reinstall; fields are never merged.
    """

    source: str
    dir: str
    entry: str
    postinstall_commands: tuple[str, ...] | None = None
    postinstall_cwd: str | None = None

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "source": self.source,
            "dir": self.dir,
            "entry": self.entry,
        }
        if self.postinstall_commands is not None:
            data["postinstall"] = {
                "commands": list(self.postinstall_commands),
                "cwd": self.postinstall_cwd,
            }
        return data
