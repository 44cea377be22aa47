"""Conversion of analysis results into JSON-ready models."""

from __future__ import annotations

import hashlib
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from artifacts.models.artifacts.cycles import CycleRecord
from artifacts.models.artifacts.graph import GraphArtifact, GraphNodeRecord
from artifacts.models.artifacts.snapshot import AnalysisSnapshot

if TYPE_CHECKING:
    from analysis.pipeline import AnalysisResult
    from graph.dependency_graph import DependencyGraph

_CYCLE_ID_LENGTH = 16


def serialize_graph(graph: DependencyGraph) -> GraphArtifact:
    """Convert the graph's edge sets into sorted lists, keeping node order."""
    nodes = [
        GraphNodeRecord(
            file_path=node.file_path,
            dependencies=sorted(node.dependencies),
            dependents=sorted(node.dependents),
        )
        for node in graph.get_all_nodes()
    ]
    return GraphArtifact(
        node_count=len(nodes),
        edge_count=graph.edge_count,
        nodes=nodes,
    )


def cycle_id(cycle: list[str]) -> str:
    """Hash the sorted members so the id does not depend on rotation."""
    digest = hashlib.sha256("|".join(sorted(cycle)).encode("utf-8")).hexdigest()
    return digest[:_CYCLE_ID_LENGTH]


def normalize_cycle(cycle: list[str]) -> CycleRecord:
    """Give a cycle a stable id and rotate it to its smallest identifier.

    Rotation keeps the relative order of members, so the same cycle found
    from a different starting node normalizes identically.
    """
    if not cycle:
        return CycleRecord(id="", nodes=[], length=0)

    start = cycle.index(min(cycle))
    return CycleRecord(
        id=cycle_id(cycle),
        nodes=cycle[start:] + cycle[:start],
        length=len(cycle),
    )


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def to_serializable(
    result: AnalysisResult,
    *,
    timestamp: str | None = None,
) -> AnalysisSnapshot:
    """Build the exportable snapshot of an analysis run.

    Args:
        result: Analysis result to convert
        timestamp: ISO 8601 timestamp to record; defaults to now (UTC)
    """
    return AnalysisSnapshot(
        timestamp=timestamp or _utc_timestamp(),
        config=result.config,
        modules=result.modules,
        graph=serialize_graph(result.graph),
        cycles=[normalize_cycle(cycle) for cycle in result.cycles],
        metrics=result.metrics,
        report=result.report,
    )


__all__ = ["cycle_id", "normalize_cycle", "serialize_graph", "to_serializable"]
