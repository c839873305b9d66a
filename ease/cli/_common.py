"""Shared CLI helpers: logging setup, project loading, result tables."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ease.models.project import Attachment, BuildProject

console = Console()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def load_project(path: Path) -> BuildProject:
    """Load a project descriptor or exit with a readable error."""
    if not path.exists():
        console.print(f"[bold red]Project descriptor not found:[/bold red] {path}")
        raise typer.Exit(code=1)
    try:
        return BuildProject.load(path)
    except ValidationError as exc:
        console.print(f"[bold red]Invalid project descriptor {path}:[/bold red]")
        console.print(str(exc))
        raise typer.Exit(code=1)


def print_attachments(attachments: list[Attachment], title: str) -> None:
    table = Table(title=title)
    table.add_column("File", style="cyan")
    table.add_column("Type", style="green")
    table.add_column("Classifier")

    for a in attachments:
        table.add_row(str(a.path), a.type, a.classifier or "[dim]-[/dim]")

    console.print(table)
