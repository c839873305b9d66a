"""Error taxonomy for the manifest goals.

Every error here is fatal: it aborts the current goal and propagates to the
surrounding build as a failure.  Nothing is retried or downgraded.
"""

from __future__ import annotations

from pathlib import Path


class EaseError(RuntimeError):
    """Base class for all manifest goal failures."""


class ParseError(EaseError, ValueError):
    """A malformed pattern string or manifest line."""

    def __init__(self, literal: str, reason: str, source: Path | str | None = None) -> None:
        self.literal = literal
        self.source = source
        where = f" in {source}" if source is not None else ""
        super().__init__(f"{reason}: {literal!r}{where}")


class MissingManifestError(EaseError):
    """A selected dependency (or the attach input) has no manifest file."""

    def __init__(self, manifest_path: Path, owner: str | None = None) -> None:
        self.manifest_path = manifest_path
        self.owner = owner
        if owner:
            msg = f"No artifact list found for {owner} at {manifest_path}"
        else:
            msg = f"No artifact list found at {manifest_path}"
        super().__init__(msg)


class MissingArtifactError(EaseError):
    """A manifest entry has no corresponding file in the source directory."""

    def __init__(self, coordinate: str, expected_path: Path) -> None:
        self.coordinate = coordinate
        self.expected_path = expected_path
        super().__init__(f"Artifact {coordinate} not found at {expected_path}")


class MissingSignatureError(EaseError):
    """A manifest entry's artifact has no signature file next to it."""

    def __init__(self, coordinate: str, expected_path: Path) -> None:
        self.coordinate = coordinate
        self.expected_path = expected_path
        super().__init__(f"Signature for {coordinate} not found at {expected_path}")


class EaseIOError(EaseError):
    """A filesystem failure while reading or writing manifest data."""


class ManifestWriteError(EaseIOError):
    """The artifact list could not be written."""
