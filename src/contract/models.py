"""Artifact and input models exposed at the contract boundary."""

from artifacts.models.artifacts.cycles import CycleRecord
from artifacts.models.artifacts.graph import GraphArtifact
from artifacts.models.artifacts.metrics import ModuleMetrics
from artifacts.models.artifacts.modules import ParsedModule
from artifacts.models.artifacts.report import ReportArtifact

__all__ = [
    "CycleRecord",
    "GraphArtifact",
    "ModuleMetrics",
    "ParsedModule",
    "ReportArtifact",
]
