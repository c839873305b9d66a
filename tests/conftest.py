"""Shared test fixtures for ease."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from ease.models.coordinates import ArtifactCoordinate
from ease.models.project import (
    AttachedArtifact,
    BuildProject,
    Dependency,
    RecordingProjectHelper,
)


@pytest.fixture
def tmp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for test artifacts."""
    return tmp_path


@pytest.fixture
def helper() -> RecordingProjectHelper:
    """Provide a fresh attachment recorder."""
    return RecordingProjectHelper()


# ---------------------------------------------------------------------------
# Factories — shared across test modules
# ---------------------------------------------------------------------------


@pytest.fixture
def make_coordinate() -> Callable[..., ArtifactCoordinate]:
    """Factory fixture: build an ArtifactCoordinate with sensible defaults."""

    def _factory(
        group_id: str = "org.example",
        artifact_id: str = "core",
        type: str = "jar",
        version: str = "1.0",
        classifier: str | None = None,
    ) -> ArtifactCoordinate:
        return ArtifactCoordinate(
            group_id=group_id,
            artifact_id=artifact_id,
            type=type,
            version=version,
            classifier=classifier,
        )

    return _factory


@pytest.fixture
def make_project(tmp_dir: Path) -> Callable[..., BuildProject]:
    """Factory fixture: build a BuildProject whose build dir lives in tmp."""

    def _factory(
        artifact_id: str = "core",
        version: str = "1.0",
        artifacts: list[ArtifactCoordinate] | None = None,
        dependencies: list[Dependency] | None = None,
        **overrides: Any,
    ) -> BuildProject:
        defaults: dict[str, Any] = {
            "group_id": "org.example",
            "artifact_id": artifact_id,
            "version": version,
            "build_directory": tmp_dir / artifact_id / "target",
            "artifacts": [AttachedArtifact(coordinate=c) for c in artifacts or []],
            "dependencies": dependencies or [],
        }
        defaults.update(overrides)
        return BuildProject(**defaults)

    return _factory


@pytest.fixture
def write_list(tmp_dir: Path) -> Callable[..., Path]:
    """Factory fixture: write raw artifact list lines to a file."""

    def _factory(name: str, *lines: str) -> Path:
        path = tmp_dir / "lists" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return path

    return _factory


@pytest.fixture
def source_dir(tmp_dir: Path) -> Path:
    """Provide an empty artifact source directory."""
    path = tmp_dir / "release-artifacts"
    path.mkdir()
    return path
