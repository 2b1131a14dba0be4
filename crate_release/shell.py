"""Process and terminal output utilities.

Thin wrappers around subprocess for running cargo and git, plus the output
helpers used to report progress. Failures surface as ReleaseError so callers
never see raw subprocess exceptions.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

from .errors import CommandError, ReleaseError


def run(*args: str, cwd: Path | None = None) -> int:
    """Run a command and return its exit status.

    Output is not captured - it streams directly to the terminal so users
    can see cargo progress and answer a signing passphrase prompt.

    Args:
        *args: Command and arguments (e.g., "git", "commit", "--all").
        cwd: Working directory for the command, or the current one.

    Raises:
        ReleaseError: If the command could not be started.
    """
    try:
        result = subprocess.run(args, cwd=cwd, check=False)
    except OSError as exc:
        raise ReleaseError(f"Failed to run {args[0]}: {exc}") from exc
    return result.returncode


def check(*args: str, cwd: Path | None = None) -> None:
    """Run a command and raise CommandError if it exits non-zero."""
    returncode = run(*args, cwd=cwd)
    if returncode != 0:
        raise CommandError(args, returncode)


def capture(*args: str, cwd: Path | None = None) -> str:
    """Run a command and return its stdout decoded as UTF-8.

    Stderr is left attached to the terminal.

    Raises:
        ReleaseError: If the command could not be started or its output
            is not valid UTF-8.
        CommandError: If the command exits non-zero.
    """
    try:
        result = subprocess.run(args, cwd=cwd, stdout=subprocess.PIPE, check=False)
    except OSError as exc:
        raise ReleaseError(f"Failed to run {args[0]}: {exc}") from exc
    if result.returncode != 0:
        raise CommandError(args, result.returncode)
    try:
        return result.stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ReleaseError(f"Output of {args[0]} is not valid UTF-8: {exc}") from exc


def step(msg: str) -> None:
    """Print a visually distinct step header.

    Used to separate the phases of a release in terminal output.
    """
    print(f"\n{'─' * 60}\n{msg}\n{'─' * 60}")


def fatal(msg: str) -> None:
    """Print a message to stderr and exit with code 1."""
    print(msg, file=sys.stderr)
    sys.exit(1)
