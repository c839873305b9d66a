"""``ease aggregate PROJECT`` — merge dependency artifact lists."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ease.cli._common import console, load_project, print_attachments
from ease.config import config
from ease.core import goals
from ease.core.errors import EaseError
from ease.models.project import RecordingProjectHelper


def aggregate_cmd(
    project_file: Path = typer.Argument(
        ...,
        help="Project descriptor (JSON) declaring the dependencies to merge.",
    ),
    include: Optional[list[str]] = typer.Option(
        None,
        "--include",
        "-i",
        help="Dependency pattern to include (repeatable).",
    ),
    exclude: Optional[list[str]] = typer.Option(
        None,
        "--exclude",
        "-x",
        help="Dependency pattern to exclude (repeatable).",
    ),
) -> None:
    """Merge the artifact lists of the selected dependencies.

    Every selected dependency must have an artifact list; use include and
    exclude patterns to leave out dependencies that have none.
    """
    project = load_project(project_file)
    helper = RecordingProjectHelper()
    includes = include if include else config.includes
    excludes = exclude if exclude else config.excludes

    try:
        attached = goals.aggregate(project, helper, includes, excludes)
    except EaseError as exc:
        console.print(f"[bold red]Aggregation failed:[/bold red] {exc}")
        raise typer.Exit(code=1)

    print_attachments(attached, f"Aggregated {project.artifact_id} {project.version}")
