"""Cargo.toml reading and writing utilities.

Uses tomlkit to preserve formatting and comments when modifying the manifest.
A release must touch nothing but the version value, so the file is read and
written as raw bytes and only that one item is replaced.
"""

from __future__ import annotations

from pathlib import Path

import semver
import tomlkit
from tomlkit.exceptions import TOMLKitError
from tomlkit.items import String

from .errors import ReleaseError
from .versions import parse_version


def read_manifest(path: Path) -> tomlkit.TOMLDocument:
    """Load and parse a Cargo.toml file.

    Returns a TOMLDocument that preserves formatting when modified and saved.

    Raises:
        ReleaseError: If the file cannot be read or is not valid TOML.
    """
    try:
        content = path.read_bytes().decode("utf-8")
    except OSError as exc:
        raise ReleaseError(f"Failed to read {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ReleaseError(f"{path} is not valid UTF-8: {exc}") from exc
    try:
        return tomlkit.parse(content)
    except TOMLKitError as exc:
        raise ReleaseError(f"Failed to parse {path}: {exc}") from exc


def write_manifest(path: Path, doc: tomlkit.TOMLDocument) -> None:
    """Save a TOMLDocument back to disk, preserving original formatting."""
    try:
        path.write_bytes(tomlkit.dumps(doc).encode("utf-8"))
    except OSError as exc:
        raise ReleaseError(f"Failed to write {path}: {exc}") from exc


def _package_table(doc: tomlkit.TOMLDocument) -> dict:
    """Return the [package] table, or an empty dict if it is absent or not a table."""
    package = doc.get("package")
    # Table and InlineTable are both dict subclasses
    return package if isinstance(package, dict) else {}


def get_package_name(doc: tomlkit.TOMLDocument) -> str:
    """Extract the crate name from [package].name."""
    name = _package_table(doc).get("name")
    if not isinstance(name, str):
        raise ReleaseError("Package name missing!")
    return str(name)


def get_version(doc: tomlkit.TOMLDocument) -> semver.Version:
    """Extract and parse [package].version.

    A workspace-inherited version (`version.workspace = true`) is not a
    string and is reported as missing.
    """
    value = _package_table(doc).get("version")
    if not isinstance(value, str):
        raise ReleaseError("Version missing!")
    return parse_version(str(value))


def set_version(doc: tomlkit.TOMLDocument, version: semver.Version) -> None:
    """Overwrite [package].version in place.

    A literal string stays literal ('...'); anything else becomes a basic
    string. tomlkit carries the old item's indentation and trailing comment
    over to the replacement value.
    """
    package = doc["package"]
    old = package.get("version")
    literal = isinstance(old, String) and old.type.is_literal()
    package["version"] = tomlkit.string(str(version), literal=literal)
