"""Include/exclude artifact filter with classifier-aware dispatch.

Classifier-qualified patterns are consulted first.  When a classifier group
matches the artifact's classifier and its residual patterns match the rest
of the coordinate, that group decides on the spot.  In every other case
(no classifier on the artifact, no group matched, or a group matched but its
residual failed) the decision falls through to the plain patterns, so
filters that never mention a classifier behave exactly as before.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ease.core.patterns import CoordinatePattern, FieldMatcher
from ease.models.coordinates import ArtifactCoordinate

logger = logging.getLogger(__name__)


class PatternMatcher:
    """Positive matcher over a list of plain patterns.

    True if any pattern matches groupId, artifactId, type and version.
    """

    def __init__(self, patterns: Iterable[CoordinatePattern]) -> None:
        self.patterns: list[CoordinatePattern] = list(patterns)

    def matches(self, artifact: ArtifactCoordinate) -> bool:
        return any(p.matches_fields(artifact) for p in self.patterns)

    def __len__(self) -> int:
        return len(self.patterns)


class ClassifierGroup:
    """A classifier matcher and the residual patterns that share it."""

    def __init__(self, classifier: FieldMatcher, residual: PatternMatcher) -> None:
        self.classifier = classifier
        self.residual = residual

    @property
    def expression(self) -> str:
        return self.classifier.expression


class ArtifactFilter:
    """Filter to include or exclude artifacts from a list of patterns.

    Parameters
    ----------
    patterns:
        Pattern strings, see :mod:`ease.core.patterns`.
    include:
        ``True`` to include artifacts that match the patterns, ``False`` to
        exclude them.

    Notes
    -----
    Classified patterns are grouped by their classifier expression text, in
    first-seen order.  Each group's residual matcher is compiled once and
    reused for every query against this filter.
    """

    def __init__(self, patterns: Iterable[str], include: bool = True) -> None:
        self.include_matches = include

        parsed = [CoordinatePattern.parse(p) for p in patterns]

        grouped: dict[str, list[CoordinatePattern]] = {}
        classifiers: dict[str, FieldMatcher] = {}
        plain: list[CoordinatePattern] = []
        for pattern in parsed:
            if pattern.classifier is None:
                plain.append(pattern)
                continue
            key = pattern.classifier.expression
            if key not in grouped:
                grouped[key] = []
                classifiers[key] = pattern.classifier
            grouped[key].append(pattern.residual())

        self.groups: list[ClassifierGroup] = [
            ClassifierGroup(classifiers[key], PatternMatcher(residuals))
            for key, residuals in grouped.items()
        ]
        self.default = PatternMatcher(plain)
        self.patterns = parsed

    def include(self, artifact: ArtifactCoordinate) -> bool:
        """Return whether ``artifact`` passes this filter."""
        if artifact.classifier is not None:
            for group in self.groups:
                if not group.classifier.matches(artifact.classifier):
                    continue
                if group.residual.matches(artifact):
                    logger.debug(
                        "Classifier pattern '%s' matched %s", group.expression, artifact
                    )
                    return self.include_matches
                # Residual failed: keep scanning, then fall back to plain patterns.

        matched = self.default.matches(artifact)
        return matched if self.include_matches else not matched

    __call__ = include

    def __repr__(self) -> str:
        kind = "include" if self.include_matches else "exclude"
        return f"ArtifactFilter({kind}, {[p.text for p in self.patterns]!r})"


class IncludeFilter(ArtifactFilter):
    """Passes only artifacts matching one of the patterns."""

    def __init__(self, patterns: Iterable[str]) -> None:
        super().__init__(patterns, include=True)


class ExcludeFilter(ArtifactFilter):
    """Passes only artifacts matching none of the patterns."""

    def __init__(self, patterns: Iterable[str]) -> None:
        super().__init__(patterns, include=False)


class DependencyFilter:
    """Combined include and exclude lists for dependency selection.

    An empty include list selects everything; the exclude list is then
    applied on top.
    """

    def __init__(
        self,
        includes: Iterable[str] = (),
        excludes: Iterable[str] = (),
    ) -> None:
        includes = list(includes)
        excludes = list(excludes)
        self.includes = IncludeFilter(includes) if includes else None
        self.excludes = ExcludeFilter(excludes) if excludes else None

    def include(self, artifact: ArtifactCoordinate) -> bool:
        if self.includes is not None and not self.includes.include(artifact):
            return False
        if self.excludes is not None and not self.excludes.include(artifact):
            return False
        return True

    __call__ = include


def build_dependency_filter(
    includes: Iterable[str] = (), excludes: Iterable[str] = ()
) -> DependencyFilter:
    """Build the filter the aggregate goal applies to declared dependencies."""
    return DependencyFilter(includes, excludes)
