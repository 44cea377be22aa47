"""Model namespace for archmap records and artifact schemas."""

from artifacts.models.artifacts.cycles import CycleRecord
from artifacts.models.artifacts.graph import GraphArtifact, GraphNodeRecord
from artifacts.models.artifacts.metrics import ModuleMetrics
from artifacts.models.artifacts.modules import (
    ParsedClass,
    ParsedModule,
    ParsedNamespace,
)
from artifacts.models.artifacts.report import (
    AnalysisReport,
    ReportArtifact,
    ReportSummary,
    ReportViolations,
)
from artifacts.models.artifacts.snapshot import AnalysisSnapshot

__all__ = [
    "AnalysisReport",
    "AnalysisSnapshot",
    "CycleRecord",
    "GraphArtifact",
    "GraphNodeRecord",
    "ModuleMetrics",
    "ParsedClass",
    "ParsedModule",
    "ParsedNamespace",
    "ReportArtifact",
    "ReportSummary",
    "ReportViolations",
]
