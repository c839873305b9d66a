"""Coordinate patterns used by include/exclude filters.

Pattern syntax::

    [groupId][:artifactId][:type][:version]
    [groupId][:artifactId][:type][:classifier:][version]

Each segment is optional and supports full and partial ``*`` wildcards; an
empty segment is an implicit wildcard.  The classifier form is recognised
only when the classifier segment is terminated by a colon, even when no
version follows.  That trailing colon is what tells ``:::client:`` (any
artifact with classifier ``client``) apart from ``:::client`` (any artifact
with version ``client``).
"""

from __future__ import annotations

import re

from ease.core.errors import ParseError
from ease.models.coordinates import ArtifactCoordinate

CLASSIFIER_PATTERN_REGEX = re.compile(r"([^:]*:[^:]*:[^:]*:)([^:]*):(.*)")

# Order in which plain pattern segments are matched.
_PLAIN_FIELDS = ("group_id", "artifact_id", "type", "version")


class FieldMatcher:
    """Matches one coordinate field against a wildcard expression.

    ``""`` and ``"*"`` match anything, including an absent value.  Otherwise
    ``*`` stands for any run of characters and the whole value must match.
    """

    __slots__ = ("expression", "_regex")

    def __init__(self, expression: str) -> None:
        self.expression = expression
        if expression in ("", "*"):
            self._regex: re.Pattern[str] | None = None
        else:
            body = ".*".join(re.escape(part) for part in expression.split("*"))
            self._regex = re.compile(body)

    @property
    def is_wildcard(self) -> bool:
        return self._regex is None

    def matches(self, value: str | None) -> bool:
        if self._regex is None:
            return True
        if value is None:
            return False
        return self._regex.fullmatch(value) is not None

    def __repr__(self) -> str:
        return f"FieldMatcher({self.expression!r})"


class CoordinatePattern:
    """One parsed include/exclude pattern.

    A pattern is either *plain* (``classifier`` is ``None``: it places no
    constraint on the classifier, present or not) or *classified* (it carries
    a classifier matcher and only matches artifacts that have a classifier).

    Use :meth:`parse` to build one from text.
    """

    def __init__(
        self,
        text: str,
        fields: list[FieldMatcher],
        classifier: FieldMatcher | None = None,
        residual_text: str | None = None,
    ) -> None:
        self.text = text
        self.fields = fields
        self.classifier = classifier
        self.residual_text = text if residual_text is None else residual_text

    @classmethod
    def parse(cls, text: str) -> CoordinatePattern:
        """Parse a pattern string.

        Strings that do not have the classified shape are plain patterns;
        that is never an error.  A pattern with more segments than there are
        coordinate fields parses, but never matches anything.
        """
        if not isinstance(text, str):
            raise ParseError(repr(text), "Artifact pattern must be a string")
        text = text.strip()
        m = CLASSIFIER_PATTERN_REGEX.fullmatch(text)
        if m:
            residual = m.group(1) + m.group(3)
            classifier = FieldMatcher(m.group(2))
        else:
            residual = text
            classifier = None

        fields = [FieldMatcher(segment) for segment in residual.split(":")]
        return cls(text, fields, classifier=classifier, residual_text=residual)

    @property
    def is_classified(self) -> bool:
        return self.classifier is not None

    @property
    def classifier_expression(self) -> str | None:
        return self.classifier.expression if self.classifier is not None else None

    def residual(self) -> CoordinatePattern:
        """This pattern with the classifier constraint removed."""
        if self.classifier is None:
            return self
        return CoordinatePattern(self.residual_text, self.fields)

    def matches_fields(self, artifact: ArtifactCoordinate) -> bool:
        """Match groupId, artifactId, type and version; ignore the classifier.

        Segments missing from the end of the pattern are wildcards; a pattern
        with segments past the version matches nothing.
        """
        if len(self.fields) > len(_PLAIN_FIELDS):
            return False
        for name, matcher in zip(_PLAIN_FIELDS, self.fields):
            if not matcher.matches(getattr(artifact, name)):
                return False
        return True

    def matches(self, artifact: ArtifactCoordinate) -> bool:
        if self.classifier is not None:
            if artifact.classifier is None:
                return False
            if not self.classifier.matches(artifact.classifier):
                return False
        return self.matches_fields(artifact)

    def __repr__(self) -> str:
        return f"CoordinatePattern({self.text!r})"
