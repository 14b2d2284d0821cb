"""LayoutService — read the descriptor and run its actions.

Each public method maps to one CLI command and returns a ServiceResult.
Domain errors become ``ok=False`` results with a stable error code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from buildlayout.domain.errors import ConfigurationError
from buildlayout.infrastructure.filesystem import summarize_tree
from buildlayout.services.base import BaseService
from buildlayout.services.result import ServiceResult
from buildlayout.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from buildlayout.domain.descriptor import BuildLayoutDescriptor

logger = structlog.get_logger(__name__)


class LayoutService(BaseService):
    """Queries and actions over one build layout."""

    @traced
    def describe(self) -> ServiceResult:
        """Everything an engine needs, in one payload."""
        d = self._descriptor
        with trace_span("order"):
            order = d.evaluation_order()
        return ServiceResult(
            ok=True,
            op="describe",
            data={
                "root_output_path": str(d.root_output_path),
                "repositories": [r.to_dict() for r in d.repositories()],
                "output_directories": {k: str(v) for k, v in d.output_directories().items()},
                "constraints": _constraint_dicts(d),
                "evaluation_order": order,
                "actions": sorted(d.actions()),
            },
        )

    @traced
    def repositories(self) -> ServiceResult:
        items = [r.to_dict() for r in self._descriptor.repositories()]
        return ServiceResult(ok=True, op="repositories", data={"count": len(items), "items": items})

    @traced
    def output_dir(self, project_name: str) -> ServiceResult:
        try:
            path = self._descriptor.output_directory_for(project_name)
        except ConfigurationError as exc:
            return ServiceResult.failure(
                "output_dir", "INVALID_PROJECT_NAME", str(exc), project=project_name
            )
        warnings: list[str] = []
        if self._descriptor.projects and project_name not in self._descriptor.projects:
            warnings.append(f"Project '{project_name}' is not declared in [projects].names")
        return ServiceResult(
            ok=True,
            op="output_dir",
            data={"project": project_name, "path": str(path)},
            warnings=warnings,
        )

    @traced
    def order(self) -> ServiceResult:
        d = self._descriptor
        try:
            d.evaluation_order_constraints()
            evaluation_order = d.evaluation_order()
        except ConfigurationError as exc:
            return ServiceResult.failure("order", "CYCLIC_ORDER", str(exc))
        return ServiceResult(
            ok=True,
            op="order",
            data={"constraints": _constraint_dicts(d), "evaluation_order": evaluation_order},
        )

    @traced
    def clean(self, *, dry_run: bool = False) -> ServiceResult:
        """Delete the output root, or only report what would go."""
        root = self._descriptor.root_output_path
        log = logger.bind(root=str(root), dry_run=dry_run)
        with trace_span("scan") as span:
            summary = summarize_tree(root)
            if span is not None:
                span.annotate("files", summary["files"])
                span.annotate("bytes", summary["bytes"])
        data: dict[str, Any] = {"path": str(root), "dry_run": dry_run, **summary}

        if dry_run:
            log.debug("clean.skipped", files=summary["files"])
            return ServiceResult(ok=True, op="clean", data={**data, "removed": False})

        try:
            with trace_span("remove"):
                self._descriptor.clean()
        except OSError as exc:
            log.debug("clean.failed", errno=exc.errno, error=exc.strerror or str(exc))
            return ServiceResult.failure(
                "clean",
                "CLEAN_FAILED",
                f"Could not remove {root}: {exc.strerror or exc}",
                path=str(exc.filename or root),
                errno=exc.errno,
            )

        if summary["exists"]:
            log.info("clean.removed", files=summary["files"], bytes=summary["bytes"])
        return ServiceResult(ok=True, op="clean", data={**data, "removed": summary["exists"]})

    @traced
    def run_action(self, name: str) -> ServiceResult:
        """Look *name* up in the capability map and invoke it."""
        actions = self._descriptor.actions()
        if name not in actions:
            return ServiceResult.failure(
                "run_action",
                "UNKNOWN_ACTION",
                f"Unknown action '{name}'",
                available=sorted(actions),
            )
        try:
            self._descriptor.run_action(name)
        except OSError as exc:
            return ServiceResult.failure(
                "run_action",
                "ACTION_FAILED",
                f"Action '{name}' failed: {exc.strerror or exc}",
                action=name,
                errno=exc.errno,
            )
        return ServiceResult(ok=True, op="run_action", data={"action": name})


def _constraint_dicts(d: BuildLayoutDescriptor) -> list[dict[str, str]]:
    return [c.to_dict() for c in sorted(d.constraints)]
