"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import tomlkit

MANIFEST = """\
# Release managed by crate-release
[package]
name = "my-crate"
version = "1.3.0-dev"  # next release
authors = ["Jane Doe <jane@example.com>"]
edition = "2021"

[dependencies]
serde = { version = "1.0", features = ["derive"] }
toml_edit   =    "0.19"

[dev-dependencies]
pretty_assertions = [
    # aligned by hand
]
"""


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create a workspace root containing Cargo.toml and Cargo.lock."""
    (tmp_path / "Cargo.toml").write_text(MANIFEST)
    (tmp_path / "Cargo.lock").write_text('version = 3\n\n[[package]]\nname = "my-crate"\n')
    return tmp_path


@pytest.fixture
def metadata_json(workspace: Path) -> str:
    """`cargo metadata` output pointing at the workspace fixture."""
    return json.dumps(
        {
            "packages": [],
            "workspace_members": ["my-crate 1.3.0-dev (path+file:///ws)"],
            "target_directory": str(workspace / "target"),
            "version": 1,
            "workspace_root": str(workspace),
        }
    )


@pytest.fixture
def sample_manifest_doc() -> tomlkit.TOMLDocument:
    """Create a sample Cargo.toml document."""
    return tomlkit.parse(MANIFEST)


@pytest.fixture
def manifest_text() -> str:
    """The raw Cargo.toml text used by the workspace fixtures."""
    return MANIFEST
