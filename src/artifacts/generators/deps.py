"""Dependency graph generator for archmap artifacts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from artifacts.serialization import serialize_graph
from artifacts.utils import _write_json
from contract.artifacts import DEPS_EDGELIST, GRAPH_JSON

if TYPE_CHECKING:
    from pathlib import Path

    from analysis.pipeline import AnalysisResult


class DepsGenerator:
    """Generator for dependency graph artifacts."""

    @property
    def name(self) -> str:
        """Generator name for logging and identification."""
        return "deps"

    def generate(self, result: AnalysisResult, out_dir: Path) -> list[str]:
        """Generate deps.edgelist and graph.json from the analysis graph."""
        out_dir.mkdir(parents=True, exist_ok=True)

        edgelist_path = out_dir / DEPS_EDGELIST
        with edgelist_path.open("w", encoding="utf-8") as f:
            for source, target in result.graph.edges():
                f.write(f"{source} -> {target}\n")

        _write_json(out_dir / GRAPH_JSON, serialize_graph(result.graph))

        return [DEPS_EDGELIST, GRAPH_JSON]


__all__ = ["DepsGenerator"]
