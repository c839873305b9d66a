"""Build-tool collaborator models.

The host build tool owns the real project model, dependency graph and
attachment machinery.  These models are the narrow view the manifest goals
consume: what a project has attached so far, which dependencies it declares
(each with the path where that dependency's manifest lives), and the
``(path, type, classifier)`` attachment requests the goals hand back.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from ease.models.coordinates import ArtifactCoordinate

MANIFEST_TYPE = "txt"
MANIFEST_CLASSIFIER = "artifacts"


def manifest_filename(artifact_id: str, version: str) -> str:
    """``<artifactId>-<version>-artifacts.txt``"""
    return f"{artifact_id}-{version}-{MANIFEST_CLASSIFIER}.{MANIFEST_TYPE}"


class AttachedArtifact(BaseModel):
    """An artifact the build has attached to a project, with its backing file."""

    model_config = ConfigDict(frozen=True)

    coordinate: ArtifactCoordinate
    file: Path | None = None


class Dependency(BaseModel):
    """A declared dependency and the location of its frozen manifest."""

    model_config = ConfigDict(frozen=True)

    coordinate: ArtifactCoordinate
    manifest_path: Path


class Attachment(BaseModel):
    """A request for the build tool to record a file as a build output."""

    model_config = ConfigDict(frozen=True)

    path: Path
    type: str
    classifier: str | None = None


class ResolvedArtifact(BaseModel):
    """A manifest entry resolved to a file on disk."""

    model_config = ConfigDict(frozen=True)

    coordinate: ArtifactCoordinate
    path: Path

    def to_attachment(self) -> Attachment:
        return Attachment(
            path=self.path,
            type=self.coordinate.type,
            classifier=self.coordinate.classifier,
        )


class BuildProject(BaseModel):
    """The slice of a build-tool project the manifest goals need.

    Loaded from a JSON project descriptor by the CLI; built directly by
    embedding code.
    """

    model_config = ConfigDict(frozen=True)

    group_id: str
    artifact_id: str
    version: str
    packaging: str = "jar"
    build_directory: Path = Path("target")
    artifacts: list[AttachedArtifact] = Field(default_factory=list)
    dependencies: list[Dependency] = Field(default_factory=list)

    @classmethod
    def load(cls, path: Path) -> BuildProject:
        """Read a project descriptor (JSON)."""
        return cls.model_validate_json(Path(path).read_text(encoding="utf-8"))

    @property
    def coordinate(self) -> ArtifactCoordinate:
        return ArtifactCoordinate(
            group_id=self.group_id,
            artifact_id=self.artifact_id,
            type=self.packaging,
            version=self.version,
        )

    @property
    def manifest_path(self) -> Path:
        """Where this project's frozen manifest is written."""
        return self.build_directory / manifest_filename(self.artifact_id, self.version)

    @property
    def artifact_coordinates(self) -> list[ArtifactCoordinate]:
        return [a.coordinate for a in self.artifacts]


# ---------------------------------------------------------------------------
# Attachment facility
# ---------------------------------------------------------------------------


@runtime_checkable
class ProjectHelper(Protocol):
    """Protocol for the build tool's artifact attachment facility."""

    def attach_artifact(
        self,
        project: BuildProject,
        path: Path,
        type: str,
        classifier: str | None,
    ) -> None:
        """Record ``path`` as a build output of ``project``."""
        ...


class RecordingProjectHelper:
    """Default helper that records attachment requests in order.

    Used by the CLI and tests; a build-tool integration supplies its own
    ``ProjectHelper``.
    """

    def __init__(self) -> None:
        self.attachments: list[Attachment] = []

    def attach_artifact(
        self,
        project: BuildProject,
        path: Path,
        type: str,
        classifier: str | None,
    ) -> None:
        self.attachments.append(
            Attachment(path=path, type=type, classifier=classifier)
        )
