"""Recording shell runner for tests."""

from pathlib import Path

from ocx.integrations.shell.abc import ShellRunner


class FakeShellRunner(ShellRunner):
    """Record commands instead of running them.

    Commands exit 0 unless listed in exit_codes.
    """

    def __init__(self, exit_codes: dict[str, int] | None = None) -> None:
        self._exit_codes = dict(exit_codes) if exit_codes is not None else {}
        self._calls: list[tuple[str, Path]] = []

    @property
    def calls(self) -> list[tuple[str, Path]]:
        """(command, cwd) pairs in the order they were run."""
        return list(self._calls)

    def run(self, command: str, cwd: Path) -> int:
        self._calls.append((command, cwd))
        return self._exit_codes.get(command, 0)
