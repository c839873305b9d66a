"""Artifact list ("manifest") text format.

One coordinate per line, UTF-8, no header::

    groupId:artifactId:type:version
    groupId:artifactId:type:classifier:version

Blank lines are ignored on read and never written.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from ease.core.errors import EaseIOError, ManifestWriteError, ParseError
from ease.models.coordinates import ArtifactCoordinate

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def encode(coordinates: Iterable[ArtifactCoordinate]) -> str:
    """Serialize coordinates, one line each, in the given order."""
    return "".join(f"{c.to_line()}\n" for c in coordinates)


def decode(text: str, source: Path | str | None = None) -> list[ArtifactCoordinate]:
    """Parse manifest text into coordinates, preserving order and duplicates.

    Raises ``ParseError`` naming the offending line (and ``source`` when
    given) for any line without exactly 4 or 5 colon-separated tokens, or
    with an empty required field.
    """
    coordinates: list[ArtifactCoordinate] = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue
        try:
            coordinates.append(ArtifactCoordinate.from_line(line))
        except ValidationError as exc:
            reason = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            )
            raise ParseError(line, f"Invalid coordinates ({reason})", source) from exc
        except ValueError as exc:
            raise ParseError(line, "Can not parse coordinates", source) from exc
    return coordinates


def read_manifest(path: Path) -> list[ArtifactCoordinate]:
    """Read and decode a manifest file.

    A missing file surfaces as ``FileNotFoundError`` so callers can raise
    their own ``MissingManifestError``; other filesystem failures become
    ``EaseIOError``.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding=ENCODING)
    except FileNotFoundError:
        raise
    except OSError as exc:
        raise EaseIOError(f"Could not read artifact list {path}: {exc}") from exc
    return decode(text, source=path)


def write_manifest(coordinates: Iterable[ArtifactCoordinate], path: Path) -> Path:
    """Write coordinates to ``path``, replacing any existing file.

    The full content is assembled before anything touches the disk.
    """
    path = Path(path)
    content = encode(coordinates)
    try:
        if path.exists():
            path.unlink()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding=ENCODING)
    except OSError as exc:
        raise ManifestWriteError(f"Could not write artifact list {path}: {exc}") from exc
    logger.debug("Wrote %d artifact(s) to %s", content.count("\n"), path)
    return path
