"""Afferent/efferent coupling and cycle membership per module."""

from __future__ import annotations

from typing import TYPE_CHECKING

from artifacts.models.artifacts.metrics import ModuleMetrics

if TYPE_CHECKING:
    from graph.dependency_graph import DependencyGraph


def cycles_by_member(cycles: list[list[str]]) -> dict[str, list[list[str]]]:
    """Map every module to the cycles it belongs to."""
    membership: dict[str, list[list[str]]] = {}
    for cycle in cycles:
        for member in dict.fromkeys(cycle):
            membership.setdefault(member, []).append(cycle)
    return membership


def compute_coupling_metrics(
    graph: DependencyGraph,
    cycles: list[list[str]],
) -> list[ModuleMetrics]:
    """Compute Ca, Ce and cycle membership for every node.

    Abstractness, instability and distance are left at their defaults; use
    ``metrics.compute_all_metrics`` for the full set.
    """
    membership = cycles_by_member(cycles)
    return [
        ModuleMetrics(
            file_path=node.file_path,
            ca=len(node.dependents),
            ce=len(node.dependencies),
            cycles=membership.get(node.file_path, []),
        )
        for node in graph.get_all_nodes()
    ]


__all__ = ["compute_coupling_metrics", "cycles_by_member"]
