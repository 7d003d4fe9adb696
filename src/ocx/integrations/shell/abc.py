"""Abstract base class for running shell commands."""

from abc import ABC, abstractmethod
from pathlib import Path


class ShellRunner(ABC):
    """Abstract interface for running a command line through a shell.

    Implementations include:
    - FakeShellRunner: Records commands and returns configured exit codes
    - RealShellRunner: subprocess-backed, inheriting stdio and environment
    """

    @abstractmethod
    def run(self, command: str, cwd: Path) -> int:
        """Run a command through the shell and wait for it.

        Args:
            command: Command line, interpreted by the shell
            cwd: Working directory

        Returns:
            The command's exit status
        """
        ...
