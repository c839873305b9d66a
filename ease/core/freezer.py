"""Freeze: record a project's attached artifacts into its artifact list."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from ease.core.manifest import write_manifest
from ease.models.coordinates import ArtifactCoordinate
from ease.models.project import (
    MANIFEST_CLASSIFIER,
    MANIFEST_TYPE,
    Attachment,
    BuildProject,
    manifest_filename,
)

logger = logging.getLogger(__name__)


class Freezer:
    """Writes artifact lists under a deterministic file name.

    The output is ``<output_dir>/<artifactId>-<version>-artifacts.txt``.  An
    existing file is replaced and ``output_dir`` is created when missing.
    Any filesystem failure raises ``ManifestWriteError``.
    """

    def freeze(
        self,
        artifacts: Iterable[ArtifactCoordinate],
        output_dir: Path,
        artifact_id: str,
        version: str,
    ) -> Path:
        artifacts = list(artifacts)
        dest = Path(output_dir) / manifest_filename(artifact_id, version)
        write_manifest(artifacts, dest)
        logger.info("Froze %d artifact(s) into %s", len(artifacts), dest)
        return dest

    def freeze_project(self, project: BuildProject) -> Path:
        """Freeze everything currently attached to ``project``."""
        return self.freeze(
            project.artifact_coordinates,
            project.build_directory,
            project.artifact_id,
            project.version,
        )

    @staticmethod
    def attachment(path: Path) -> Attachment:
        """The attachment request for a written artifact list."""
        return Attachment(path=path, type=MANIFEST_TYPE, classifier=MANIFEST_CLASSIFIER)
