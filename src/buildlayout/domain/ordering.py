"""Evaluation-order constraints between subprojects.

Constraints form a directed graph (dependency -> dependent). The graph must
be acyclic; a self-edge counts as a cycle.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import networkx as nx

from buildlayout.domain.errors import ConfigurationError


@dataclass(frozen=True, order=True)
class EvaluationOrderConstraint:
    """*dependent* must be evaluated after *dependency*."""

    dependent: str
    dependency: str

    def to_dict(self) -> dict[str, str]:
        return {"dependent": self.dependent, "dependency": self.dependency}


def anchor_constraints(projects: Iterable[str], anchor: str) -> list[EvaluationOrderConstraint]:
    """Make every project other than *anchor* evaluate after *anchor*."""
    return [
        EvaluationOrderConstraint(dependent=name, dependency=anchor)
        for name in projects
        if name != anchor
    ]


def build_order_graph(
    constraints: Iterable[EvaluationOrderConstraint],
    projects: Iterable[str] = (),
) -> nx.DiGraph:
    """Build a DiGraph with an edge dependency -> dependent per constraint."""
    g = nx.DiGraph()
    g.add_nodes_from(projects)
    for c in constraints:
        g.add_edge(c.dependency, c.dependent)
    return g


def ensure_acyclic(g: nx.DiGraph) -> None:
    """Raise :class:`ConfigurationError` naming one cycle if *g* has any."""
    try:
        cycle = nx.find_cycle(g)
    except nx.NetworkXNoCycle:
        return
    # find_cycle yields edges dependency -> dependent; report as a chain.
    chain = [edge[0] for edge in cycle] + [cycle[0][0]]
    msg = f"Cyclic evaluation order: {' -> '.join(chain)}"
    raise ConfigurationError(msg)


def topological_order(g: nx.DiGraph) -> list[str]:
    """Dependencies first; ties broken lexicographically so output is stable."""
    ensure_acyclic(g)
    return list(nx.lexicographical_topological_sort(g))
