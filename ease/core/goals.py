"""The four build goals: freeze, aggregate, attach, attach-signatures.

Each goal runs to completion or raises; attachments are handed to the
build tool's ``ProjectHelper`` only after all files have been written or
resolved.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from ease.core.aggregator import Aggregator
from ease.core.artifact_filter import build_dependency_filter
from ease.core.attacher import DEFAULT_SIGNATURE_SUFFIX, Attacher, SourceLayout
from ease.core.freezer import Freezer
from ease.models.project import Attachment, BuildProject, ProjectHelper, ResolvedArtifact

logger = logging.getLogger(__name__)


def _attach_all(
    project: BuildProject, helper: ProjectHelper, attachments: list[Attachment]
) -> list[Attachment]:
    for a in attachments:
        helper.attach_artifact(project, a.path, a.type, a.classifier)
    return attachments


def freeze(project: BuildProject, helper: ProjectHelper) -> list[Attachment]:
    """Record the project's attached artifacts and attach the list."""
    freezer = Freezer()
    path = freezer.freeze_project(project)
    attached = _attach_all(project, helper, [freezer.attachment(path)])
    logger.info("Successfully attached artifact list to the project.")
    return attached


def aggregate(
    project: BuildProject,
    helper: ProjectHelper,
    includes: Iterable[str] = (),
    excludes: Iterable[str] = (),
) -> list[Attachment]:
    """Merge the selected dependencies' lists and attach the result."""
    freezer = Freezer()
    aggregator = Aggregator(build_dependency_filter(includes, excludes))
    path = aggregator.aggregate_project(project, freezer)
    attached = _attach_all(project, helper, [freezer.attachment(path)])
    logger.info("Successfully attached artifact list to the project.")
    return attached


def _attach_resolved(
    project: BuildProject, helper: ProjectHelper, resolved: list[ResolvedArtifact]
) -> list[Attachment]:
    attached = _attach_all(project, helper, [r.to_attachment() for r in resolved])
    for r in resolved:
        logger.info("Attached %s", r.coordinate)
    return attached


def attach(
    project: BuildProject,
    helper: ProjectHelper,
    manifest_path: Path,
    source_dir: Path,
    layout: SourceLayout = SourceLayout.FLAT,
) -> list[Attachment]:
    """Attach every artifact listed in ``manifest_path`` from ``source_dir``."""
    resolved = Attacher(source_dir, layout).attach(manifest_path)
    return _attach_resolved(project, helper, resolved)


def attach_signatures(
    project: BuildProject,
    helper: ProjectHelper,
    manifest_path: Path,
    source_dir: Path,
    layout: SourceLayout = SourceLayout.FLAT,
    signature_suffix: str = DEFAULT_SIGNATURE_SUFFIX,
) -> list[Attachment]:
    """Like :func:`attach`, also attaching each artifact's signature."""
    attacher = Attacher(source_dir, layout, signature_suffix)
    resolved = attacher.attach_signatures(manifest_path)
    return _attach_resolved(project, helper, resolved)
