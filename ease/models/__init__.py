"""ease data models — all Pydantic v2, all frozen (immutable)."""

from ease.models.coordinates import ArtifactCoordinate
from ease.models.project import (
    MANIFEST_CLASSIFIER,
    MANIFEST_TYPE,
    AttachedArtifact,
    Attachment,
    BuildProject,
    Dependency,
    ProjectHelper,
    RecordingProjectHelper,
    ResolvedArtifact,
    manifest_filename,
)

__all__ = [
    # coordinates
    "ArtifactCoordinate",
    # project
    "AttachedArtifact",
    "Attachment",
    "BuildProject",
    "Dependency",
    "ResolvedArtifact",
    "ProjectHelper",
    "RecordingProjectHelper",
    "MANIFEST_TYPE",
    "MANIFEST_CLASSIFIER",
    "manifest_filename",
]
