"""BuildLayoutDescriptor — the immutable root build layout.

Holds the repository list, the redirected output root, the evaluation-order
graph between subprojects, and a capability map of named actions.

INVARIANT: A descriptor that exists is valid. Every check runs in
``__post_init__``; nothing mutates afterwards. Subprojects receive paths
derived from the shared root, never a handle to mutate it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

import networkx as nx

from buildlayout.domain.errors import ConfigurationError
from buildlayout.domain.ordering import (
    EvaluationOrderConstraint,
    anchor_constraints,
    build_order_graph,
    ensure_acyclic,
    topological_order,
)
from buildlayout.domain.paths import output_directory, validate_project_name, validate_root_output
from buildlayout.domain.repositories import RepositoryLocation

if TYPE_CHECKING:
    from buildlayout.config.settings import BuildSettings

logger = logging.getLogger(__name__)

CLEAN_ACTION = "clean"


@dataclass(frozen=True)
class BuildLayoutDescriptor:
    """Read-only build layout consumed by an external build engine.

    Attributes:
        root_output_path: Absolute directory all build outputs nest under.
            The root project writes here directly.
        repository_locations: Repositories in resolver precedence order.
        projects: Declared subproject names. When non-empty, constraints may
            only reference these names.
        constraints: Evaluation-order edges.
    """

    root_output_path: Path
    repository_locations: tuple[RepositoryLocation, ...] = ()
    projects: tuple[str, ...] = ()
    constraints: frozenset[EvaluationOrderConstraint] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        # Coerce caller-supplied iterables into immutable containers.
        object.__setattr__(self, "root_output_path", Path(self.root_output_path))
        object.__setattr__(self, "repository_locations", tuple(self.repository_locations))
        object.__setattr__(self, "projects", tuple(self.projects))
        object.__setattr__(self, "constraints", frozenset(self.constraints))

        validate_root_output(self.root_output_path)

        seen: set[str] = set()
        for name in self.projects:
            validate_project_name(name)
            if name in seen:
                msg = f"Project declared twice: {name!r}"
                raise ConfigurationError(msg)
            seen.add(name)

        for c in self.constraints:
            for name in (c.dependent, c.dependency):
                validate_project_name(name)
                if self.projects and name not in seen:
                    msg = f"Evaluation order references undeclared project {name!r}"
                    raise ConfigurationError(msg)

        ensure_acyclic(self._order_graph())

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def create(
        cls,
        root_output_path: Path | str,
        *,
        repositories: Iterable[RepositoryLocation] = (),
        projects: Iterable[str] = (),
        constraints: Iterable[EvaluationOrderConstraint] = (),
        evaluation_anchor: str | None = None,
    ) -> BuildLayoutDescriptor:
        """Build a descriptor, expanding *evaluation_anchor* into constraints.

        With an anchor, every other declared project is evaluated after it.
        """
        project_names = tuple(projects)
        edges = set(constraints)
        if evaluation_anchor:
            edges.update(anchor_constraints(project_names, evaluation_anchor))
        return cls(
            root_output_path=Path(root_output_path),
            repository_locations=tuple(repositories),
            projects=project_names,
            constraints=frozenset(edges),
        )

    @classmethod
    def from_settings(cls, settings: BuildSettings) -> BuildLayoutDescriptor:
        """Build the descriptor from merged CLI/env/TOML settings."""
        return cls.create(
            settings.root_output_path,
            repositories=(RepositoryLocation(name=r.name, url=r.url) for r in settings.repositories),
            projects=settings.projects.names,
            constraints=(
                EvaluationOrderConstraint(dependent=e.dependent, dependency=e.dependency)
                for e in settings.projects.order
            ),
            evaluation_anchor=settings.projects.evaluation_anchor or None,
        )

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    def repositories(self) -> tuple[RepositoryLocation, ...]:
        """Repository locations in declaration order."""
        return self.repository_locations

    def output_directory_for(self, project_name: str) -> Path:
        """Return ``root_output_path / project_name``.

        Raises:
            ConfigurationError: empty name or one with traversal segments.
        """
        return output_directory(self.root_output_path, project_name)

    def output_directories(self) -> dict[str, Path]:
        """Output directory of every declared project."""
        return {name: self.output_directory_for(name) for name in self.projects}

    def evaluation_order_constraints(self) -> frozenset[EvaluationOrderConstraint]:
        """Declared ordering edges, re-checked for cycles."""
        ensure_acyclic(self._order_graph())
        return self.constraints

    def evaluation_order(self) -> list[str]:
        """All known projects, each after everything it depends on."""
        return topological_order(self._order_graph())

    def _order_graph(self) -> nx.DiGraph:
        return build_order_graph(self.constraints, self.projects)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def actions(self) -> Mapping[str, Callable[[], None]]:
        """Named zero-argument actions an engine may look up and invoke."""
        return MappingProxyType({CLEAN_ACTION: self.clean})

    def run_action(self, name: str) -> None:
        """Invoke the action registered under *name*."""
        action = self.actions().get(name)
        if action is None:
            known = ", ".join(sorted(self.actions()))
            msg = f"Unknown action {name!r} (available: {known})"
            raise ConfigurationError(msg)
        action()

    def clean(self) -> None:
        """Recursively delete ``root_output_path``.

        A missing root is a no-op. Filesystem errors propagate unmodified
        and already-deleted files stay deleted.
        """
        from buildlayout.infrastructure.filesystem import remove_tree

        removed = remove_tree(self.root_output_path)
        logger.debug("clean root=%s removed=%s", self.root_output_path, removed)
