"""``ease attach`` / ``ease attach-signatures`` — attach pre-built artifacts.

Reads an artifact list from a fixed path and attaches the listed files from a
fixed source directory.  No resolution, no rebuilding, no network.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ease.cli._common import console, load_project, print_attachments
from ease.config import config
from ease.core import goals
from ease.core.attacher import SourceLayout
from ease.core.errors import EaseError
from ease.models.project import RecordingProjectHelper


def _manifest_or_exit(manifest: Optional[Path]) -> Path:
    manifest = manifest or config.manifest_path
    if manifest is None:
        console.print(
            "[bold red]No artifact list given.[/bold red] "
            "Pass --manifest or set EASE_MANIFEST_PATH."
        )
        raise typer.Exit(code=1)
    return manifest


_PROJECT_ARG = typer.Argument(
    ...,
    help="Project descriptor (JSON) of the deploying project.",
)
_MANIFEST_OPT = typer.Option(
    None,
    "--manifest",
    "-m",
    help="Artifact list to attach (defaults to EASE_MANIFEST_PATH).",
)
_SOURCE_OPT = typer.Option(
    None,
    "--source-dir",
    "-s",
    help="Directory holding the built artifacts.",
)
_LAYOUT_OPT = typer.Option(
    None,
    "--layout",
    help="Arrangement of files under the source directory.",
)


def attach_cmd(
    project_file: Path = _PROJECT_ARG,
    manifest: Optional[Path] = _MANIFEST_OPT,
    source_dir: Optional[Path] = _SOURCE_OPT,
    layout: Optional[SourceLayout] = _LAYOUT_OPT,
) -> None:
    """Attach every artifact named in an artifact list."""
    project = load_project(project_file)
    manifest_path = _manifest_or_exit(manifest)
    helper = RecordingProjectHelper()

    try:
        attached = goals.attach(
            project,
            helper,
            manifest_path,
            source_dir or config.artifact_source_dir,
            layout or config.layout,
        )
    except EaseError as exc:
        console.print(f"[bold red]Attach failed:[/bold red] {exc}")
        raise typer.Exit(code=1)

    print_attachments(attached, f"Attached from {manifest_path}")


def attach_signatures_cmd(
    project_file: Path = _PROJECT_ARG,
    manifest: Optional[Path] = _MANIFEST_OPT,
    source_dir: Optional[Path] = _SOURCE_OPT,
    layout: Optional[SourceLayout] = _LAYOUT_OPT,
    suffix: Optional[str] = typer.Option(
        None,
        "--suffix",
        help="Signature file suffix (defaults to EASE_SIGNATURE_SUFFIX).",
    ),
) -> None:
    """Attach every listed artifact together with its signature file."""
    project = load_project(project_file)
    manifest_path = _manifest_or_exit(manifest)
    helper = RecordingProjectHelper()

    try:
        attached = goals.attach_signatures(
            project,
            helper,
            manifest_path,
            source_dir or config.artifact_source_dir,
            layout or config.layout,
            suffix or config.signature_suffix,
        )
    except EaseError as exc:
        console.print(f"[bold red]Attach failed:[/bold red] {exc}")
        raise typer.Exit(code=1)

    print_attachments(attached, f"Attached with signatures from {manifest_path}")
