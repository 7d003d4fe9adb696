"""Config root discovery.

Decides whether an invocation targets a global config dir under the home
directory or the nearest project containing a .opencode directory.
"""

import logging
import os
from pathlib import Path

from ocx.constants import CONFIG_DIR_NAME, GLOBAL_CONFIG_DIRS
from ocx.models.config_root import ConfigRoot

logger = logging.getLogger(__name__)


def _normalize(path: Path) -> Path:
    """Absolute, lexically normalized path (symlinks are not resolved)."""
    return Path(os.path.abspath(path))


def is_inside_dir(child: Path, parent: Path) -> bool:
    """Check path containment on a separator boundary.

    "/a/bc" is not inside "/a/b". Comparison uses os.path.normcase, so it is
    case-insensitive (including drive letters) on Windows and byte-exact on
    POSIX. Paths on different drives never contain each other.
    """
    child_str = os.path.normcase(str(_normalize(child)))
    parent_str = os.path.normcase(str(_normalize(parent)))
    if child_str == parent_str:
        return True
    parent_with_sep = parent_str if parent_str.endswith(os.sep) else parent_str + os.sep
    return child_str.startswith(parent_with_sep)


def global_config_dirs(home_dir: Path) -> list[Path]:
    return [_normalize(home_dir.joinpath(*parts)) for parts in GLOBAL_CONFIG_DIRS]


def find_nearest_project_root(start: Path) -> Path:
    """Walk up from start to the first directory containing .opencode.

    Falls back to start itself when no ancestor has one, so project installs
    create the marker there.
    """
    start = _normalize(start)
    for candidate in [start, *start.parents]:
        if (candidate / CONFIG_DIR_NAME).is_dir():
            return candidate
    return start


def resolve_config_root(cwd: Path, home_dir: Path) -> ConfigRoot:
    """Determine the config root for an invocation. Never fails.

    Args:
        cwd: Directory the invocation operates from
        home_dir: Home directory holding the global config dirs

    Returns:
        A global ConfigRoot if cwd is inside a global config dir, otherwise a
        project ConfigRoot at the nearest ancestor with .opencode (or cwd)
    """
    absolute_cwd = _normalize(cwd)

    for global_dir in global_config_dirs(home_dir):
        if is_inside_dir(absolute_cwd, global_dir):
            logger.debug("Using global config root %s", global_dir)
            return ConfigRoot.create(kind="global", root_dir=global_dir, config_dir=global_dir)

    project_root = find_nearest_project_root(absolute_cwd)
    logger.debug("Using project config root %s", project_root)
    return ConfigRoot.create(
        kind="project",
        root_dir=project_root,
        config_dir=project_root / CONFIG_DIR_NAME,
    )
