"""Main Typer application — imports and registers all CLI commands.

Entry point: ``ease`` (configured via pyproject.toml console_scripts).
"""

from __future__ import annotations

from typing import Optional

import typer

from ease.cli._common import configure_logging
from ease.cli.commands.aggregate import aggregate_cmd
from ease.cli.commands.attach import attach_cmd, attach_signatures_cmd
from ease.cli.commands.freeze import freeze_cmd
from ease.cli.commands.inspect import check_filter_cmd, show_cmd
from ease.config import config

app = typer.Typer(
    name="ease",
    help="ease: freeze release artifacts at build time, attach them at deploy time.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def main_callback(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (defaults to EASE_LOG_LEVEL)."
    ),
) -> None:
    configure_logging(log_level.upper() if log_level else config.effective_log_level)


# Register subcommands
app.command(name="freeze", help="Write and attach a project's artifact list.")(freeze_cmd)
app.command(name="aggregate", help="Merge dependency artifact lists.")(aggregate_cmd)
app.command(name="attach", help="Attach artifacts named in an artifact list.")(attach_cmd)
app.command(
    name="attach-signatures",
    help="Attach listed artifacts together with their signatures.",
)(attach_signatures_cmd)
app.command(name="show", help="Display an artifact list.")(show_cmd)
app.command(name="check-filter", help="Test a coordinate against filter patterns.")(
    check_filter_cmd
)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
