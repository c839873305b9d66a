"""``ease freeze PROJECT`` — record a project's artifacts into its artifact list."""

from __future__ import annotations

from pathlib import Path

import typer

from ease.cli._common import console, load_project, print_attachments
from ease.core import goals
from ease.core.errors import EaseError
from ease.models.project import RecordingProjectHelper


def freeze_cmd(
    project_file: Path = typer.Argument(
        ...,
        help="Project descriptor (JSON) listing the attached artifacts.",
    ),
) -> None:
    """Write ``<artifactId>-<version>-artifacts.txt`` and attach it."""
    project = load_project(project_file)
    helper = RecordingProjectHelper()

    try:
        attached = goals.freeze(project, helper)
    except EaseError as exc:
        console.print(f"[bold red]Freeze failed:[/bold red] {exc}")
        raise typer.Exit(code=1)

    print_attachments(attached, f"Frozen {project.artifact_id} {project.version}")
