"""Artifact contract definitions.

Filenames and formats of the deterministic artifacts written by
``archmap generate``.
"""

from __future__ import annotations

from dataclasses import dataclass

# Artifact schema version written into json/jsonl records.
ARTIFACT_SCHEMA_VERSION = 1

# Artifact filename constants (stable contract identifiers).
DEPS_EDGELIST = "deps.edgelist"
GRAPH_JSON = "graph.json"
CYCLES_JSONL = "cycles.jsonl"
METRICS_JSONL = "metrics.jsonl"
REPORT_JSON = "report.json"


@dataclass(frozen=True)
class ArtifactSpec:
    """Specification for a generated artifact."""

    filename: str
    format: str
    required_fields_note: str


ARTIFACT_SPECS: dict[str, ArtifactSpec] = {
    "deps_edgelist": ArtifactSpec(
        filename=DEPS_EDGELIST,
        format="edgelist",
        required_fields_note="Dependency edge pairs (source, target).",
    ),
    "graph": ArtifactSpec(
        filename=GRAPH_JSON,
        format="json",
        required_fields_note="GraphArtifact fields required by contract.",
    ),
    "cycles": ArtifactSpec(
        filename=CYCLES_JSONL,
        format="jsonl",
        required_fields_note="CycleRecord fields required by contract.",
    ),
    "metrics": ArtifactSpec(
        filename=METRICS_JSONL,
        format="jsonl",
        required_fields_note="ModuleMetrics fields required by contract.",
    ),
    "report": ArtifactSpec(
        filename=REPORT_JSON,
        format="json",
        required_fields_note="ReportArtifact fields required by contract.",
    ),
}
