"""Attach: resolve a frozen artifact list to files without any resolution.

The source directory is configured independently of the build tool's
dependency mechanism, so nothing is downloaded, resolved or rebuilt.  Every
listed artifact must already be on disk.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from ease.core.errors import (
    MissingArtifactError,
    MissingManifestError,
    MissingSignatureError,
)
from ease.core.manifest import read_manifest
from ease.models.coordinates import ArtifactCoordinate
from ease.models.project import ResolvedArtifact

logger = logging.getLogger(__name__)

DEFAULT_SIGNATURE_SUFFIX = ".asc"


class SourceLayout(str, Enum):
    """How artifact files are arranged under the source directory."""

    FLAT = "flat"              # <dir>/<artifactId>-<version>[-<classifier>].<ext>
    REPOSITORY = "repository"  # <dir>/<group/path>/<artifactId>/<version>/<file>


class Attacher:
    """Looks up the files behind each entry of an artifact list.

    Parameters
    ----------
    source_dir:
        Directory holding the built artifacts.
    layout:
        File arrangement under ``source_dir``.
    signature_suffix:
        Suffix appended to an artifact's file name to find its signature.
    """

    def __init__(
        self,
        source_dir: Path,
        layout: SourceLayout = SourceLayout.FLAT,
        signature_suffix: str = DEFAULT_SIGNATURE_SUFFIX,
    ) -> None:
        self.source_dir = Path(source_dir)
        self.layout = SourceLayout(layout)
        self.signature_suffix = signature_suffix

    def locate(self, coordinate: ArtifactCoordinate) -> Path:
        """Expected path of ``coordinate``'s file (existence not checked)."""
        if self.layout is SourceLayout.REPOSITORY:
            return self.source_dir / coordinate.repository_path
        return self.source_dir / coordinate.filename

    def _read(self, manifest_path: Path) -> list[ArtifactCoordinate]:
        try:
            return read_manifest(manifest_path)
        except FileNotFoundError as exc:
            raise MissingManifestError(Path(manifest_path)) from exc

    def _resolve(self, coordinate: ArtifactCoordinate) -> ResolvedArtifact:
        path = self.locate(coordinate)
        if not path.is_file():
            raise MissingArtifactError(coordinate.id, path)
        logger.debug("Resolved %s to %s", coordinate, path)
        return ResolvedArtifact(coordinate=coordinate, path=path)

    def attach(self, manifest_path: Path) -> list[ResolvedArtifact]:
        """Resolve every entry of the artifact list at ``manifest_path``."""
        resolved = [self._resolve(c) for c in self._read(manifest_path)]
        logger.info("Resolved %d artifact(s) from %s", len(resolved), manifest_path)
        return resolved

    def attach_signatures(self, manifest_path: Path) -> list[ResolvedArtifact]:
        """Resolve every entry together with its signature file.

        Returns each artifact followed by its signature.  The signature's
        coordinate keeps the artifact's classifier and carries the type
        ``<type><suffix>`` (``jar.asc``).  Signatures are only checked for
        presence, never generated.
        """
        resolved: list[ResolvedArtifact] = []
        for coordinate in self._read(manifest_path):
            artifact = self._resolve(coordinate)
            sig_path = artifact.path.with_name(artifact.path.name + self.signature_suffix)
            if not sig_path.is_file():
                raise MissingSignatureError(coordinate.id, sig_path)
            sig_coordinate = coordinate.model_copy(
                update={"type": coordinate.type + self.signature_suffix}
            )
            resolved.append(artifact)
            resolved.append(ResolvedArtifact(coordinate=sig_coordinate, path=sig_path))
        logger.info(
            "Resolved %d artifact(s) with signatures from %s",
            len(resolved) // 2,
            manifest_path,
        )
        return resolved
