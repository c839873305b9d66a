"""Artifact coordinates: the 5-tuple identifying one physical artifact."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

# Artifact handler types whose files carry a different extension.
_TYPE_EXTENSIONS: dict[str, str] = {
    "test-jar": "jar",
    "maven-plugin": "jar",
    "ejb": "jar",
    "ejb-client": "jar",
    "bundle": "jar",
    "java-source": "jar",
    "javadoc": "jar",
}


class ArtifactCoordinate(BaseModel):
    """Identifies one physical artifact.

    ``classifier=None`` means "no classifier" and is a different value from
    the empty string.  No field may contain a colon, since the manifest line
    format is colon-delimited.
    """

    model_config = ConfigDict(frozen=True)

    group_id: str
    artifact_id: str
    type: str
    version: str
    classifier: str | None = None

    @field_validator("group_id", "artifact_id", "type", "version")
    @classmethod
    def _required(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        if ":" in value:
            raise ValueError(f"must not contain ':' (got {value!r})")
        return value

    @field_validator("classifier")
    @classmethod
    def _no_colon(cls, value: str | None) -> str | None:
        if value is not None and ":" in value:
            raise ValueError(f"must not contain ':' (got {value!r})")
        return value

    # ------------------------------------------------------------------
    # Text form
    # ------------------------------------------------------------------

    @classmethod
    def from_line(cls, line: str) -> ArtifactCoordinate:
        """Build a coordinate from ``g:a:t:v`` or ``g:a:t:c:v``.

        Raises ``ValueError`` for any other token count; the manifest codec
        turns that into a ``ParseError`` naming the source file.
        """
        tokens = line.split(":")
        if len(tokens) == 4:
            group_id, artifact_id, type_, version = tokens
            classifier = None
        elif len(tokens) == 5:
            group_id, artifact_id, type_, classifier, version = tokens
        else:
            raise ValueError(f"Can not parse coordinates: {line}")
        return cls(
            group_id=group_id,
            artifact_id=artifact_id,
            type=type_,
            classifier=classifier,
            version=version,
        )

    def to_line(self) -> str:
        """Return the manifest line for this coordinate."""
        if self.classifier is None:
            return f"{self.group_id}:{self.artifact_id}:{self.type}:{self.version}"
        return (
            f"{self.group_id}:{self.artifact_id}:{self.type}:"
            f"{self.classifier}:{self.version}"
        )

    @property
    def id(self) -> str:
        return self.to_line()

    def __str__(self) -> str:
        return self.to_line()

    # ------------------------------------------------------------------
    # File naming
    # ------------------------------------------------------------------

    @property
    def has_classifier(self) -> bool:
        return self.classifier is not None

    @property
    def extension(self) -> str:
        """File extension for this artifact's type."""
        return _TYPE_EXTENSIONS.get(self.type, self.type)

    @property
    def filename(self) -> str:
        """``<artifactId>-<version>[-<classifier>].<extension>``"""
        stem = f"{self.artifact_id}-{self.version}"
        if self.classifier:
            stem = f"{stem}-{self.classifier}"
        return f"{stem}.{self.extension}"

    @property
    def repository_path(self) -> str:
        """Relative path of this artifact in a repository-style layout."""
        group_path = self.group_id.replace(".", "/")
        return f"{group_path}/{self.artifact_id}/{self.version}/{self.filename}"
