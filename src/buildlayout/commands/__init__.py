"""Subcommand modules for buildlayout.

``register_commands()`` defers imports so ``buildlayout --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the export group and the standalone commands."""
    from buildlayout.commands.export import export

    cli.add_command(export)

    from buildlayout.commands.clean import clean, run_action
    from buildlayout.commands.layout import describe, order, outdir, repos

    cli.add_command(describe)
    cli.add_command(repos)
    cli.add_command(outdir)
    cli.add_command(order)
    cli.add_command(clean)
    cli.add_command(run_action)
