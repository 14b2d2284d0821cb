"""Commands: actions that touch the filesystem."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from buildlayout.commands._base import BuildCommand

if TYPE_CHECKING:
    from buildlayout.commands._context import AppContext


@click.command(
    cls=BuildCommand,
    examples="""\
  buildlayout clean --dry-run
  buildlayout clean""",
)
@click.option("--dry-run", is_flag=True, help="Report what would be removed.")
@click.pass_obj
def clean(app: AppContext, dry_run: bool) -> None:
    """Delete the build output root."""
    from buildlayout.services.layout import LayoutService

    app.emit(LayoutService(app.descriptor).clean(dry_run=dry_run))


@click.command(
    "run",
    cls=BuildCommand,
    examples="""\
  buildlayout run clean""",
)
@click.argument("action")
@click.pass_obj
def run_action(app: AppContext, action: str) -> None:
    """Invoke a named ACTION from the layout's action map."""
    from buildlayout.services.layout import LayoutService

    app.emit(LayoutService(app.descriptor).run_action(action))
