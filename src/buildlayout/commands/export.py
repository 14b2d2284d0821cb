"""Command group: render the layout for external build engines."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from buildlayout.commands._base import BuildGroup

if TYPE_CHECKING:
    from buildlayout.commands._context import AppContext

_EXPORT_EXAMPLES = """\
  buildlayout export gradle
  buildlayout export gradle --output android/build.gradle.kts"""


@click.group(cls=BuildGroup, examples=_EXPORT_EXAMPLES)
@click.pass_obj
def export(app: AppContext) -> None:
    """Export the layout in build-engine formats."""


@export.command(examples=_EXPORT_EXAMPLES)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write to this file instead of stdout.",
)
@click.pass_obj
def gradle(app: AppContext, output: Path | None) -> None:
    """Render a Gradle Kotlin DSL root build script."""
    from buildlayout.services.export import ExportService

    svc = ExportService(app.descriptor, workspace_root=app.settings.workspace_root)
    app.emit(svc.export_gradle(output=output))
