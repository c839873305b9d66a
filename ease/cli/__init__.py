"""ease CLI — Typer-based command-line interface.

Provides the ``ease`` command with one subcommand per build goal (freeze,
aggregate, attach, attach-signatures) plus helpers to inspect artifact lists
and try out filter patterns.

All output uses Rich for formatted terminal display.
"""
