"""Applying install plans.

Each item is staged in a temporary sibling of its target directory and
renamed into place, so an item is either fully installed or untouched. The
managed config section is merged once after every item has been staged, and
postinstall commands run last, only when explicitly allowed.
"""

import logging
import os
import shutil
import tempfile
from pathlib import Path

from ocx.constants import STAGING_DIR_PREFIX
from ocx.exceptions import (
    EmptyPlanSetError,
    MissingConfigRootError,
    PathTraversalError,
    PostinstallFailedError,
    TargetExistsError,
)
from ocx.integrations.shell.abc import ShellRunner
from ocx.io.managed_config import (
    merge_install_plans,
    parse_managed_config,
    read_config_text,
    write_managed_config,
)
from ocx.models.config_root import ConfigRoot
from ocx.models.plan import ApplyInstallResult, InstallPlan

logger = logging.getLogger(__name__)

_INSTALLED_DIR_MODE = 0o755


def _is_within(path: Path, directory: Path) -> bool:
    return path == directory or directory in path.parents


def _relative_to_target(path: Path, target_dir: Path) -> Path:
    try:
        rel = path.relative_to(target_dir)
    except ValueError as e:
        raise PathTraversalError(str(path), "Refusing to write outside target dir") from e
    if not rel.parts or ".." in rel.parts:
        raise PathTraversalError(str(path), "Refusing to write outside target dir")
    return rel


def _remove_existing(target: Path) -> None:
    if target.is_dir() and not target.is_symlink():
        shutil.rmtree(target)
    else:
        target.unlink()


def _common_config_root(plans: list[InstallPlan]) -> ConfigRoot:
    if not plans:
        raise EmptyPlanSetError()

    config_root = plans[0].config_root
    for plan in plans[1:]:
        if plan.config_root != config_root:
            raise MissingConfigRootError(
                f"plan for {plan.item.key} targets {plan.config_root.config_dir}, "
                f"expected {config_root.config_dir}"
            )
    return config_root


def stage_item(plan: InstallPlan, *, overwrite: bool) -> Path:
    """Write an item's files to a temporary sibling dir and swap it into place.

    On any failure the temporary directory is removed and the target is left
    as it was (absent, or present and untouched).

    Args:
        plan: Plan for the item
        overwrite: Replace an existing target directory

    Returns:
        The installed target directory

    Raises:
        TargetExistsError: If the target exists and overwrite is False
        PathTraversalError: If a planned write lies outside the target dir
        OSError: If writing a staged file fails
    """
    target_dir = plan.item.target_dir

    for directory in plan.mkdirs:
        if not _is_within(directory, target_dir):
            directory.mkdir(parents=True, exist_ok=True)
    target_dir.parent.mkdir(parents=True, exist_ok=True)

    staging_dir = Path(
        tempfile.mkdtemp(prefix=f"{STAGING_DIR_PREFIX}{plan.item.name}-", dir=target_dir.parent)
    )
    try:
        os.chmod(staging_dir, _INSTALLED_DIR_MODE)

        for directory in plan.mkdirs:
            if _is_within(directory, target_dir) and directory != target_dir:
                (staging_dir / directory.relative_to(target_dir)).mkdir(
                    parents=True, exist_ok=True
                )

        for write in plan.writes:
            dest = staging_dir / _relative_to_target(write.path, target_dir)
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.write_text(write.content, encoding="utf-8", newline="")
            if write.mode is not None:
                os.chmod(dest, int(write.mode, 8))

        if target_dir.exists() or target_dir.is_symlink():
            if not overwrite:
                raise TargetExistsError(target_dir)
            _remove_existing(target_dir)

        staging_dir.rename(target_dir)
    except BaseException:
        shutil.rmtree(staging_dir, ignore_errors=True)
        raise

    logger.debug("Installed %s to %s", plan.item.key, target_dir)
    return target_dir


def run_postinstall(plan: InstallPlan, shell: ShellRunner) -> None:
    """Run a plan's postinstall commands in order, stopping at the first failure.

    Raises:
        PostinstallFailedError: Naming the first command that exits non-zero
    """
    if plan.postinstall is None:
        return

    for command in plan.postinstall.commands:
        logger.debug("Postinstall for %s: %s", plan.item.key, command)
        exit_code = shell.run(command, plan.postinstall.cwd)
        if exit_code != 0:
            raise PostinstallFailedError(command, exit_code)


def apply_install_plans(
    plans: list[InstallPlan],
    *,
    overwrite: bool,
    allow_postinstall: bool,
    shell: ShellRunner,
) -> ApplyInstallResult:
    """Install every planned item, update the config, then run postinstall.

    Existing targets are checked up front when overwrite is False, so a
    conflict fails before any item is written.

    Args:
        plans: Plans sharing one config root, in installation order
        overwrite: Replace existing item directories
        allow_postinstall: Run postinstall commands after the config is written
        shell: Runner for postinstall commands

    Returns:
        ApplyInstallResult with installed dirs and the edited config path

    Raises:
        EmptyPlanSetError: If plans is empty
        MissingConfigRootError: If plans disagree on config root
        TargetExistsError: If a target exists and overwrite is False
        ConfigDocumentError: If the existing config document is not a JSONC object
        PostinstallFailedError: If a postinstall command fails (files and
            config are already committed at that point)
    """
    config_root = _common_config_root(plans)

    if not overwrite:
        for plan in plans:
            if plan.item.target_dir.exists():
                raise TargetExistsError(plan.item.target_dir)

    # Fail on an unusable config document before any item is written
    parse_managed_config(read_config_text(config_root.config_path), config_root.config_path)

    config_root.config_dir.mkdir(parents=True, exist_ok=True)

    wrote_dirs: list[Path] = []
    for plan in plans:
        wrote_dirs.append(stage_item(plan, overwrite=overwrite))

    config_text = read_config_text(config_root.config_path)
    managed = parse_managed_config(config_text, config_root.config_path)
    write_managed_config(
        config_root.config_path, config_text, merge_install_plans(managed, plans)
    )

    ran_postinstall = False
    if allow_postinstall:
        for plan in plans:
            if plan.postinstall is None:
                continue
            ran_postinstall = True
            run_postinstall(plan, shell)

    return ApplyInstallResult(
        wrote_dirs=wrote_dirs,
        edited_config_path=config_root.config_path,
        ran_postinstall=ran_postinstall,
    )
