"""Exceptions raised by the ocx resolve, plan, and install pipeline.

Every error names the offending identity (spec, item key, file path, or
command) so the CLI can print it verbatim.
"""

from dataclasses import dataclass
from pathlib import Path


class OcxError(Exception):
    """Base exception for all ocx failures."""


class InvalidSpecError(OcxError):
    """Raised when a registry spec is empty or whitespace."""

    def __init__(self, spec: str) -> None:
        super().__init__("Missing registry item spec")
        self.spec = spec


class ItemNotFoundError(OcxError):
    """Raised when no manifest source recognizes a spec."""

    def __init__(self, spec: str) -> None:
        super().__init__(
            f"Unknown registry spec: {spec} (try embedded item, URL, or path to .json)"
        )
        self.spec = spec


class FetchError(OcxError):
    """Raised when fetching a remote manifest fails."""

    def __init__(self, url: str, reason: str, status_code: int | None = None) -> None:
        if status_code is not None:
            message = f"Failed to fetch registry item: {url} ({status_code})"
        else:
            message = f"Failed to fetch registry item: {url} ({reason})"
        super().__init__(message)
        self.url = url
        self.reason = reason
        self.status_code = status_code


@dataclass(frozen=True)
class ManifestViolation:
    """A single field-level schema violation."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ManifestValidationError(OcxError):
    """Raised when a manifest fails schema validation."""

    def __init__(self, origin: str, violations: tuple[ManifestViolation, ...]) -> None:
        details = "; ".join(str(v) for v in violations)
        super().__init__(f"Invalid registry item {origin}: {details}")
        self.origin = origin
        self.violations = violations


class ManifestReadError(OcxError):
    """Raised when a local manifest file cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read registry item {path}: {reason}")
        self.path = path


class CyclicDependencyError(OcxError):
    """Raised when registryDependencies form a cycle."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Registry dependency cycle detected at {key}")
        self.key = key


class PathTraversalError(OcxError):
    """Raised when a manifest path would escape its item directory."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{reason}: {path}")
        self.path = path


class TargetExistsError(OcxError):
    """Raised when an install target exists and overwrite was not requested."""

    def __init__(self, target: Path) -> None:
        super().__init__(f"Target already exists: {target} (use --overwrite)")
        self.target = target


class PostinstallFailedError(OcxError):
    """Raised when a postinstall command exits non-zero."""

    def __init__(self, command: str, exit_code: int) -> None:
        super().__init__(f"Postinstall command failed ({exit_code}): {command}")
        self.command = command
        self.exit_code = exit_code


class EmptyPlanSetError(OcxError):
    """Raised when apply is called without any plans."""

    def __init__(self) -> None:
        super().__init__("No install plans to apply")


class MissingConfigRootError(OcxError):
    """Raised when plans passed to apply target different config roots."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Missing config root: {detail}")


class ConfigDocumentError(OcxError):
    """Raised when the existing config document is not a JSONC object."""

    def __init__(self, path: Path | None, reason: str) -> None:
        where = f" {path}" if path is not None else ""
        super().__init__(f"Cannot update config document{where}: {reason}")
        self.path = path
