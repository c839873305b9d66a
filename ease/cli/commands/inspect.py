"""``ease show`` and ``ease check-filter`` — inspection helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from ease.cli._common import console
from ease.core.artifact_filter import build_dependency_filter
from ease.core.errors import EaseError
from ease.core.manifest import read_manifest
from ease.models.coordinates import ArtifactCoordinate


def show_cmd(
    manifest: Path = typer.Argument(..., help="Artifact list to display."),
) -> None:
    """Show the entries of an artifact list."""
    try:
        entries = read_manifest(manifest)
    except FileNotFoundError:
        console.print(f"[bold red]Artifact list not found:[/bold red] {manifest}")
        raise typer.Exit(code=1)
    except EaseError as exc:
        console.print(f"[bold red]Invalid artifact list:[/bold red] {exc}")
        raise typer.Exit(code=1)

    if not entries:
        console.print("[dim]Artifact list is empty.[/dim]")
        return

    table = Table(title=str(manifest))
    table.add_column("Group", style="cyan")
    table.add_column("Artifact", style="cyan")
    table.add_column("Type", style="green")
    table.add_column("Classifier")
    table.add_column("Version", style="green")
    for c in entries:
        table.add_row(
            c.group_id, c.artifact_id, c.type, c.classifier or "[dim]-[/dim]", c.version
        )
    console.print(table)


def check_filter_cmd(
    coordinate: str = typer.Argument(
        ..., help="Coordinate to test, as g:a:t:v or g:a:t:c:v."
    ),
    include: Optional[list[str]] = typer.Option(
        None, "--include", "-i", help="Include pattern (repeatable)."
    ),
    exclude: Optional[list[str]] = typer.Option(
        None, "--exclude", "-x", help="Exclude pattern (repeatable)."
    ),
) -> None:
    """Report whether a coordinate passes the given include/exclude patterns."""
    try:
        artifact = ArtifactCoordinate.from_line(coordinate)
        selected = build_dependency_filter(include or [], exclude or [])(artifact)
    except (EaseError, ValueError) as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1)

    if selected:
        console.print(f"[green]INCLUDED[/green] {artifact}")
    else:
        console.print(f"[yellow]EXCLUDED[/yellow] {artifact}")
