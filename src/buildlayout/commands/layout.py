"""Commands: read-only views of the build layout."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from buildlayout.commands._base import BuildCommand

if TYPE_CHECKING:
    from buildlayout.commands._context import AppContext


@click.command(
    cls=BuildCommand,
    examples="""\
  buildlayout describe
  buildlayout --json describe""",
)
@click.pass_obj
def describe(app: AppContext) -> None:
    """Show repositories, output directories, evaluation order and actions."""
    from buildlayout.services.layout import LayoutService

    app.emit(LayoutService(app.descriptor).describe())


@click.command(
    cls=BuildCommand,
    examples="""\
  buildlayout repos
  buildlayout -q repos""",
)
@click.pass_obj
def repos(app: AppContext) -> None:
    """List repositories in resolver precedence order."""
    from buildlayout.services.layout import LayoutService

    app.emit(LayoutService(app.descriptor).repositories())


@click.command(
    cls=BuildCommand,
    examples="""\
  buildlayout outdir app
  buildlayout -q outdir feature_login""",
)
@click.argument("project")
@click.pass_obj
def outdir(app: AppContext, project: str) -> None:
    """Print the output directory for PROJECT."""
    from buildlayout.services.layout import LayoutService

    app.emit(LayoutService(app.descriptor).output_dir(project))


@click.command(
    cls=BuildCommand,
    examples="""\
  buildlayout order
  buildlayout -q order""",
)
@click.pass_obj
def order(app: AppContext) -> None:
    """Show evaluation-order constraints and the resulting project order."""
    from buildlayout.services.layout import LayoutService

    app.emit(LayoutService(app.descriptor).order())
