"""Release pipeline: locate → read → plan → bump → lock → commit → tag.

This module orchestrates a crate release:
1. Ask cargo for the workspace root
2. Read Cargo.toml and refuse to release a final version
3. Bump the prerelease version to the next minor release
4. Refresh Cargo.lock for the crate
5. Commit everything and create a signed tag

Nothing is retried. If the lock update or the commit fails, Cargo.toml and
Cargo.lock are put back the way they were found; once the release commit
exists, a failure leaves it in place.
"""

from __future__ import annotations

from pathlib import Path

import semver
import tomlkit
from pydantic import ValidationError

from .errors import ReleaseError
from .models import CargoMetadata, ReleasePlan
from .shell import capture, check, step
from .toml import (
    get_package_name,
    get_version,
    read_manifest,
    set_version,
    write_manifest,
)
from .versions import bump_minor, is_prerelease

MANIFEST_NAME = "Cargo.toml"
LOCK_NAME = "Cargo.lock"


def get_workspace_root() -> Path:
    """Find the workspace root of the crate in the current directory.

    Raises:
        ReleaseError: If cargo fails, prints something that is not JSON,
            or reports no workspace root.
    """
    stdout = capture("cargo", "metadata", "--format-version", "1")
    try:
        metadata = CargoMetadata.model_validate_json(stdout)
    except ValidationError as exc:
        if any(err["type"] == "missing" for err in exc.errors()):
            raise ReleaseError("Missing workspace root") from exc
        raise ReleaseError(f"Malformed cargo metadata: {exc}") from exc
    return Path(metadata.workspace_root)


def update_lock(workspace_root: Path, package_name: str) -> None:
    """Update the lock file entry for a single package."""
    check("cargo", "update", "--package", package_name, cwd=workspace_root)


def commit_all(workspace_root: Path, message: str) -> None:
    """Commit all tracked changes with the given message."""
    check("git", "commit", "--all", "--message", message, cwd=workspace_root)


def make_tag(
    workspace_root: Path, version: semver.Version, package_name: str
) -> None:
    """Create a signed tag `<name>-<version>` with message `<name> <version>`."""
    check(
        "git",
        "tag",
        "--sign",
        "--message",
        f"{package_name} {version}",
        f"{package_name}-{version}",
        cwd=workspace_root,
    )


def plan_release(doc: tomlkit.TOMLDocument) -> ReleasePlan:
    """Work out which version a manifest releases as.

    Raises:
        ReleaseError: If name or version are missing or invalid, or the
            version is already final.
    """
    package_name = get_package_name(doc)
    version = get_version(doc)
    if not is_prerelease(version):
        raise ReleaseError(f"Cannot make release from final version: {version}")
    return ReleasePlan(
        package_name=package_name,
        current=str(version),
        next=str(bump_minor(version)),
    )


def _snapshot(paths: list[Path]) -> dict[Path, bytes | None]:
    """Read the current bytes of each path; None for files that don't exist."""
    try:
        return {p: p.read_bytes() if p.exists() else None for p in paths}
    except OSError as exc:
        raise ReleaseError(f"Failed to read {exc.filename}: {exc}") from exc


def _restore(snapshot: dict[Path, bytes | None]) -> list[str]:
    """Put files back to the state captured by _snapshot().

    Every file is attempted even if an earlier one fails.

    Returns:
        Descriptions of the files that could not be restored.
    """
    failures: list[str] = []
    for path, content in snapshot.items():
        try:
            if content is None:
                path.unlink(missing_ok=True)
            else:
                path.write_bytes(content)
        except OSError as exc:
            failures.append(f"{path.name} ({exc.strerror or exc})")
            continue
        print(f"  Restored {path.name}")
    return failures


def make_release(*, dry_run: bool = False) -> ReleasePlan:
    """Execute the full release workflow.

    Args:
        dry_run: If True, stop after printing the plan; nothing is written
            and no command other than `cargo metadata` runs.

    Returns:
        The plan that was (or, for a dry run, would be) released.
    """
    step("Locating workspace")
    workspace_root = get_workspace_root()
    print(f"  {workspace_root}")

    step("Reading manifest")
    manifest_path = workspace_root / MANIFEST_NAME
    manifest = read_manifest(manifest_path)
    plan = plan_release(manifest)
    print(f"  {plan.package_name}: {plan.current} → {plan.next}")

    if dry_run:
        print(f"\n  Would commit: {plan.commit_message}")
        print(f"  Would tag:    {plan.tag_name} ({plan.tag_message})")
        return plan

    next_version = semver.Version.parse(plan.next)
    snapshot = _snapshot([manifest_path, workspace_root / LOCK_NAME])

    step("Bumping version")
    set_version(manifest, next_version)
    write_manifest(manifest_path, manifest)
    print(f"  Wrote {manifest_path}")

    try:
        step(f"Updating {LOCK_NAME}")
        update_lock(workspace_root, plan.package_name)

        step("Committing")
        commit_all(workspace_root, plan.commit_message)
    except ReleaseError as exc:
        failures = _restore(snapshot)
        if failures:
            raise ReleaseError(
                f"{exc}; could not restore {', '.join(failures)}"
            ) from exc
        raise

    step("Tagging")
    make_tag(workspace_root, next_version, plan.package_name)
    print(f"  {plan.tag_name}")

    print(f"\n{'=' * 60}\nReleased {plan.tag_name}\n{'=' * 60}")
    return plan
