"""Coupling, abstractness, instability and distance metrics."""

from __future__ import annotations

from typing import TYPE_CHECKING

from artifacts.models.artifacts.metrics import ModuleMetrics
from metrics.abstractness import compute_abstractness
from metrics.coupling import compute_coupling_metrics, cycles_by_member
from metrics.distance import classify_zone, compute_distance
from metrics.instability import compute_instability

if TYPE_CHECKING:
    from collections.abc import Sequence

    from artifacts.models.artifacts.modules import ParsedModule
    from graph.dependency_graph import DependencyGraph


def compute_all_metrics(
    graph: DependencyGraph,
    modules: Sequence[ParsedModule],
    cycles: list[list[str]],
) -> list[ModuleMetrics]:
    """Compute the full metric set for every node of the graph.

    Nodes that were only seen as import targets have no module record and
    get abstractness 0. When a module identifier occurs more than once, the
    last record wins.
    """
    module_map = {module.file_path: module for module in modules}
    membership = cycles_by_member(cycles)
    metrics: list[ModuleMetrics] = []

    for node in graph.get_all_nodes():
        module = module_map.get(node.file_path)
        ca = len(node.dependents)
        ce = len(node.dependencies)
        abstractness = compute_abstractness(module) if module is not None else 0.0
        instability = compute_instability(ca, ce)

        metrics.append(
            ModuleMetrics(
                file_path=node.file_path,
                ca=ca,
                ce=ce,
                abstractness=abstractness,
                instability=instability,
                distance=compute_distance(abstractness, instability),
                cycles=membership.get(node.file_path, []),
            )
        )

    return metrics


__all__ = [
    "ModuleMetrics",
    "classify_zone",
    "compute_abstractness",
    "compute_all_metrics",
    "compute_coupling_metrics",
    "compute_distance",
    "compute_instability",
]
