"""Full analysis snapshot written by ``archmap analyze --export``."""

from __future__ import annotations

from pydantic import BaseModel, Field

from artifacts.models.artifacts.cycles import CycleRecord
from artifacts.models.artifacts.graph import GraphArtifact
from artifacts.models.artifacts.metrics import ModuleMetrics
from artifacts.models.artifacts.modules import ParsedModule
from artifacts.models.artifacts.report import AnalysisReport
from rules.config import ArchmapConfig

SNAPSHOT_FORMAT_VERSION = "1.0.0"


class AnalysisSnapshot(BaseModel):
    """Everything one analysis run produced, in JSON-ready form."""

    version: str = SNAPSHOT_FORMAT_VERSION
    timestamp: str
    config: ArchmapConfig
    modules: list[ParsedModule] = Field(default_factory=list)
    graph: GraphArtifact
    cycles: list[CycleRecord] = Field(default_factory=list)
    metrics: list[ModuleMetrics] = Field(default_factory=list)
    report: AnalysisReport


__all__ = ["SNAPSHOT_FORMAT_VERSION", "AnalysisSnapshot"]
