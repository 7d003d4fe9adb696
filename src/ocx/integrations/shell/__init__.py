"""Shell integration for postinstall commands."""

from ocx.integrations.shell.abc import ShellRunner as ShellRunner
from ocx.integrations.shell.fake import FakeShellRunner as FakeShellRunner
from ocx.integrations.shell.real import RealShellRunner as RealShellRunner
