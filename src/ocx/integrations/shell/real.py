"""subprocess-backed shell runner."""

import logging
import subprocess
from pathlib import Path

from ocx.integrations.shell.abc import ShellRunner

logger = logging.getLogger(__name__)


class RealShellRunner(ShellRunner):
    """Run commands with the system shell, inheriting stdio and environment."""

    def run(self, command: str, cwd: Path) -> int:
        logger.debug("Running %r in %s", command, cwd)
        result = subprocess.run(command, shell=True, cwd=cwd, check=False)
        return result.returncode
