"""ease: separate building release artifacts from deploying them.

A release build freezes each project's artifacts into an artifact list,
aggregates the lists of selected dependencies into one, and a later deploy
build attaches exactly those pre-built files, with no resolution, no
rebuilding and no network access.
"""

__version__ = "0.1.0"
__description__ = "Freeze, aggregate and attach release artifact lists"

from ease.core.aggregator import Aggregator
from ease.core.artifact_filter import ArtifactFilter, ExcludeFilter, IncludeFilter
from ease.core.attacher import Attacher, SourceLayout
from ease.core.freezer import Freezer
from ease.core.manifest import decode, encode, read_manifest, write_manifest
from ease.core.patterns import CoordinatePattern
from ease.models.coordinates import ArtifactCoordinate

__all__ = [
    "Aggregator",
    "ArtifactCoordinate",
    "ArtifactFilter",
    "Attacher",
    "CoordinatePattern",
    "ExcludeFilter",
    "Freezer",
    "IncludeFilter",
    "SourceLayout",
    "decode",
    "encode",
    "read_manifest",
    "write_manifest",
    "__version__",
]
