"""ExportService — render the layout as a Gradle Kotlin DSL root script.

The script reproduces the descriptor for Gradle itself: repositories,
redirected build directories, evaluationDependsOn blocks, and the clean
task. Rendering goes through a Jinja2 template the workspace may override.
"""

from __future__ import annotations

import os
from collections import defaultdict
from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import TemplateError

from buildlayout import __version__
from buildlayout.domain.descriptor import CLEAN_ACTION
from buildlayout.infrastructure.templates import build_template_environment
from buildlayout.services.base import BaseService
from buildlayout.services.result import ServiceResult
from buildlayout.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from buildlayout.domain.descriptor import BuildLayoutDescriptor

GRADLE_TEMPLATE = "build.gradle.kts.j2"


def gradle_project_path(project_name: str) -> str:
    """``libs/net`` becomes ``:libs:net``; Gradle separates levels with colons."""
    return ":" + project_name.replace("\\", "/").replace("/", ":")


class ExportService(BaseService):
    """Renders the descriptor for external build engines."""

    def __init__(
        self, descriptor: BuildLayoutDescriptor, *, workspace_root: Path | None = None
    ) -> None:
        super().__init__(descriptor)
        self._workspace_root = workspace_root

    def _build_dir_expression(self) -> str:
        """Output root relative to the workspace, else absolute; always ``/``-separated."""
        root = self._descriptor.root_output_path
        if self._workspace_root is None:
            return root.as_posix()
        try:
            rel = os.path.relpath(root, self._workspace_root.absolute())
        except ValueError:
            # Different drives on Windows.
            return root.as_posix()
        return Path(rel).as_posix()

    def _evaluation_groups(self) -> list[tuple[str, list[str]]]:
        grouped: dict[str, list[str]] = defaultdict(list)
        for c in sorted(self._descriptor.constraints):
            grouped[gradle_project_path(c.dependent)].append(gradle_project_path(c.dependency))
        return sorted(grouped.items())

    def _nested_outputs(self) -> list[tuple[str, str]]:
        """Projects whose output dir is not ``<root>/<project.name>`` under Gradle's default."""
        nested = []
        for name in self._descriptor.projects:
            if "/" in name or "\\" in name:
                nested.append((gradle_project_path(name), name.replace("\\", "/")))
        return nested

    def render_gradle(self) -> str:
        env = build_template_environment("gradle", workspace_root=self._workspace_root)
        template = env.get_template(GRADLE_TEMPLATE)
        return template.render(
            version=__version__,
            repositories=[r.to_dict() for r in self._descriptor.repositories()],
            build_dir=self._build_dir_expression(),
            nested_outputs=self._nested_outputs(),
            evaluation_groups=self._evaluation_groups(),
            clean_action=CLEAN_ACTION,
        )

    @traced
    def export_gradle(self, *, output: Path | None = None) -> ServiceResult:
        """Render the script; write it to *output* when given."""
        try:
            with trace_span("render"):
                content = self.render_gradle()
        except TemplateError as exc:
            return ServiceResult.failure(
                "export_gradle", "EXPORT_FAILED", f"Template error: {exc}"
            )

        if output is None:
            return ServiceResult(ok=True, op="export_gradle", data={"content": content})

        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(content, encoding="utf-8")
        except OSError as exc:
            return ServiceResult.failure(
                "export_gradle",
                "EXPORT_FAILED",
                f"Could not write {output}: {exc.strerror or exc}",
                path=str(output),
            )
        return ServiceResult(
            ok=True,
            op="export_gradle",
            data={"path": str(output), "bytes": len(content.encode("utf-8"))},
        )
