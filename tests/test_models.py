"""Tests for crate_release.models."""

from __future__ import annotations

from crate_release.models import CargoMetadata, ReleasePlan


def test_cargo_metadata_ignores_other_fields() -> None:
    meta = CargoMetadata.model_validate_json(
        '{"workspace_root": "/ws", "version": 1, "packages": []}'
    )
    assert meta.workspace_root == "/ws"


def test_release_plan_labels() -> None:
    plan = ReleasePlan(package_name="mdcat", current="0.9.0-dev", next="0.10.0")
    assert plan.commit_message == "Release 0.10.0"
    assert plan.tag_name == "mdcat-0.10.0"
    assert plan.tag_message == "mdcat 0.10.0"
