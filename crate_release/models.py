"""Data models for crate-release.

These Pydantic models describe what cargo tells us about the workspace and
what a release is going to do.
"""

from __future__ import annotations

from pydantic import BaseModel


class CargoMetadata(BaseModel):
    """The subset of `cargo metadata --format-version 1` output we use.

    Attributes:
        workspace_root: Absolute path of the workspace's top-level directory.
            All other fields cargo reports are ignored.
    """

    workspace_root: str


class ReleasePlan(BaseModel):
    """Records the version change a release makes for a crate.

    Attributes:
        package_name: The crate's `package.name`.
        current: The prerelease version found in the manifest.
        next: The version being released.
    """

    package_name: str
    current: str
    next: str

    @property
    def commit_message(self) -> str:
        return f"Release {self.next}"

    @property
    def tag_name(self) -> str:
        return f"{self.package_name}-{self.next}"

    @property
    def tag_message(self) -> str:
        return f"{self.package_name} {self.next}"
