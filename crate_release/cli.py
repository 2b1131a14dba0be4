"""CLI entry point for crate-release."""

from __future__ import annotations

import click

from crate_release.errors import ReleaseError
from crate_release.pipeline import make_release
from crate_release.shell import fatal


@click.command()
@click.option(
    "--dry-run",
    is_flag=True,
    help="Show the version that would be released without changing anything.",
)
@click.version_option(package_name="crate-release")
def cli(dry_run: bool) -> None:
    """Release the crate in the current workspace.

    Bumps a prerelease version in Cargo.toml to the next minor release,
    updates Cargo.lock, commits, and creates a signed tag.
    """
    try:
        make_release(dry_run=dry_run)
    except ReleaseError as exc:
        fatal(f"Release failed: {exc}")
