"""Stable contract surface for archmap inputs and artifacts.

Constants are imported eagerly; models, loaders and validators are resolved
lazily so importing the contract does not pull in pydantic models.
"""

from contract.artifacts import (
    ARTIFACT_SCHEMA_VERSION,
    ARTIFACT_SPECS,
    CYCLES_JSONL,
    DEPS_EDGELIST,
    GRAPH_JSON,
    METRICS_JSONL,
    REPORT_JSON,
    ArtifactSpec,
)


def __getattr__(name: str) -> object:
    if name in {
        "CycleRecord",
        "GraphArtifact",
        "ModuleMetrics",
        "ParsedModule",
        "ReportArtifact",
    }:
        from contract import models

        return getattr(models, name)

    if name in {"ModuleInputError", "load_modules"}:
        from contract import inputs

        return getattr(inputs, name)

    if name in {"ValidationMessage", "ValidationResult", "validate_artifacts"}:
        from contract import validation

        return getattr(validation, name)

    msg = f"module 'contract' has no attribute {name!r}"
    raise AttributeError(msg)


__all__ = [
    "ARTIFACT_SCHEMA_VERSION",
    "ARTIFACT_SPECS",
    "CYCLES_JSONL",
    "DEPS_EDGELIST",
    "GRAPH_JSON",
    "METRICS_JSONL",
    "REPORT_JSON",
    "ArtifactSpec",
    "CycleRecord",
    "GraphArtifact",
    "ModuleInputError",
    "ModuleMetrics",
    "ParsedModule",
    "ReportArtifact",
    "ValidationMessage",
    "ValidationResult",
    "load_modules",
    "validate_artifacts",
]
