"""Per-module coupling and abstractness metrics."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ModuleMetrics(BaseModel):
    """Metrics for a single node of the dependency graph."""

    file_path: str
    ca: int = Field(ge=0, description="Afferent coupling: modules depending on this one")
    ce: int = Field(ge=0, description="Efferent coupling: modules this one depends on")
    abstractness: float = 0.0
    instability: float = 0.0
    distance: float = 0.0
    cycles: list[list[str]] = Field(default_factory=list)


__all__ = ["ModuleMetrics"]
