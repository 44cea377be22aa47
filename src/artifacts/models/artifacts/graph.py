"""Serializable dependency graph models."""

from __future__ import annotations

from pydantic import BaseModel, Field


def _artifact_schema_version() -> int:
    from contract.artifacts import ARTIFACT_SCHEMA_VERSION

    return ARTIFACT_SCHEMA_VERSION


class GraphNodeRecord(BaseModel):
    """A graph node with sorted edge lists instead of sets."""

    file_path: str
    dependencies: list[str] = Field(default_factory=list)
    dependents: list[str] = Field(default_factory=list)


class GraphArtifact(BaseModel):
    """Serializable dependency graph."""

    schema_version: int = Field(default_factory=_artifact_schema_version)
    node_count: int
    edge_count: int
    nodes: list[GraphNodeRecord] = Field(default_factory=list)


__all__ = ["GraphArtifact", "GraphNodeRecord"]
