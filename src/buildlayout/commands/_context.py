"""AppContext — shared Click context for all commands.

Created once by the root group; subcommands receive it via
``@click.pass_obj``. The descriptor is built lazily so ``--help`` and
``--version`` never validate configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from buildlayout.output.formatters import OutputSettings, format_result
from buildlayout.services.result import ServiceResult

if TYPE_CHECKING:
    from buildlayout.config.settings import BuildSettings
    from buildlayout.domain.descriptor import BuildLayoutDescriptor


class AppContext:
    """Settings, the lazily-built descriptor, and result emission."""

    def __init__(self, settings: BuildSettings) -> None:
        self.settings = settings
        self._descriptor: BuildLayoutDescriptor | None = None

        from buildlayout.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            context={"workspace": str(settings.workspace_root)},
        )

        if settings.verbose:
            from buildlayout.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def descriptor(self) -> BuildLayoutDescriptor:
        """The validated descriptor. Invalid configuration exits with code 1."""
        if self._descriptor is None:
            from buildlayout.domain.descriptor import BuildLayoutDescriptor
            from buildlayout.domain.errors import ConfigurationError

            try:
                self._descriptor = BuildLayoutDescriptor.from_settings(self.settings)
            except ConfigurationError as exc:
                source = str(self.settings.config_path) if self.settings.config_path else None
                self.emit(
                    ServiceResult.failure("load_config", "INVALID_CONFIG", str(exc), config=source)
                )
                raise  # pragma: no cover - emit() exits
        return self._descriptor

    def emit(self, result: ServiceResult) -> None:
        """Write *result*; success to stdout, failure to stderr with exit 1.

        Warnings go to stderr in human mode; JSON already carries them.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
