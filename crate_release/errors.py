"""Exceptions raised by the release workflow.

Every failure that should stop a release is a ReleaseError. Lower-level
exceptions are wrapped where they are first seen so the CLI has exactly one
thing to catch.
"""

from __future__ import annotations


class ReleaseError(Exception):
    """A release step failed; the run must stop."""


class CommandError(ReleaseError):
    """An external command exited with a non-zero status.

    Attributes:
        command: The full argument list that was executed.
        returncode: The exit status reported by the process.
    """

    def __init__(self, command: tuple[str, ...], returncode: int) -> None:
        self.command = command
        self.returncode = returncode
        super().__init__(str(self))

    def __str__(self) -> str:
        # Trailing arguments are usually free-form messages; keep it short
        cmd_str = " ".join(self.command[:4])
        if len(self.command) > 4:
            cmd_str += " ..."
        return f"Command {cmd_str} failed with exit status {self.returncode}"
