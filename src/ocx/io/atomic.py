"""Atomic file writes."""

import os
import stat
import tempfile
from pathlib import Path


def _mode_for(path: Path) -> int:
    """Permission bits for the written file: the existing file's, else 0o666 minus umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_text_atomic(path: Path, text: str) -> None:
    """Write text to path atomically.

    Writes to a temporary file in the destination directory, then renames it
    into place, so readers see either the old or the new content. Creates
    parent directories if they don't exist. An existing file keeps its
    permission bits; a new file gets the umask default.

    Args:
        path: Destination file
        text: Content to write (UTF-8)
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    mode = _mode_for(path)

    fd, temp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.chmod(temp_path, mode)
        temp_path.replace(path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise
