"""Pick the output mode for a ServiceResult: JSON, quiet, or Rich."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from buildlayout.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from buildlayout.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output-related subset of the global CLI flags."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format *result* as a string; JSON wins over quiet, quiet over human."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
