"""Aggregate: merge the artifact lists of selected dependencies.

A selected dependency without an artifact list fails the whole aggregation.
Skipping it would silently produce an incomplete release, so dependencies
that have no list must be steered around with include/exclude patterns.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from ease.core.errors import MissingManifestError
from ease.core.freezer import Freezer
from ease.core.manifest import read_manifest
from ease.models.coordinates import ArtifactCoordinate
from ease.models.project import BuildProject, Dependency

logger = logging.getLogger(__name__)


class Aggregator:
    """Merges dependency artifact lists through a dependency filter.

    Parameters
    ----------
    artifact_filter:
        Any callable deciding whether a dependency coordinate is selected,
        typically an ``ArtifactFilter`` or ``DependencyFilter``.
    """

    def __init__(self, artifact_filter: Callable[[ArtifactCoordinate], bool]) -> None:
        self._filter = artifact_filter

    def select(self, dependencies: Iterable[Dependency]) -> list[Dependency]:
        """Return the dependencies the filter selects, in declaration order."""
        selected = []
        for dep in dependencies:
            if self._filter(dep.coordinate):
                selected.append(dep)
            else:
                logger.debug("Skipping dependency %s", dep.coordinate)
        return selected

    def aggregate(self, dependencies: Iterable[Dependency]) -> list[ArtifactCoordinate]:
        """Concatenate the selected dependencies' lists, first occurrence wins."""
        merged: dict[ArtifactCoordinate, None] = {}
        for dep in self.select(dependencies):
            try:
                entries = read_manifest(dep.manifest_path)
            except FileNotFoundError as exc:
                raise MissingManifestError(
                    Path(dep.manifest_path), owner=dep.coordinate.id
                ) from exc
            logger.debug(
                "Read %d artifact(s) from %s", len(entries), dep.manifest_path
            )
            for entry in entries:
                merged.setdefault(entry, None)
        return list(merged)

    def aggregate_project(
        self, project: BuildProject, freezer: Freezer | None = None
    ) -> Path:
        """Aggregate ``project``'s dependencies and write the merged list.

        The merged list is written under the aggregating project's own
        identity and build directory.
        """
        merged = self.aggregate(project.dependencies)
        freezer = freezer or Freezer()
        path = freezer.freeze(
            merged, project.build_directory, project.artifact_id, project.version
        )
        logger.info(
            "Aggregated %d artifact(s) from %d dependencies into %s",
            len(merged),
            len(project.dependencies),
            path,
        )
        return path
