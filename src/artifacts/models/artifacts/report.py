"""Analysis report models.

This module contains the aggregate summary, the violation sets and the
pass/fail verdict produced by the report engine.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from artifacts.models.artifacts.metrics import ModuleMetrics


def _artifact_schema_version() -> int:
    from contract.artifacts import ARTIFACT_SCHEMA_VERSION

    return ARTIFACT_SCHEMA_VERSION


class ReportSummary(BaseModel):
    """Project-wide totals."""

    total_modules: int
    total_imports: int
    total_exports: int
    total_classes: int
    total_interfaces: int
    cycles_detected: int


class ReportViolations(BaseModel):
    """Cycles and modules beyond the distance threshold."""

    cycles: list[list[str]] = Field(default_factory=list)
    threshold_exceeded: list[ModuleMetrics] = Field(default_factory=list)


class AnalysisReport(BaseModel):
    """Summary, metrics and violations of one analysis run."""

    summary: ReportSummary
    metrics: list[ModuleMetrics] = Field(default_factory=list)
    violations: ReportViolations = Field(default_factory=ReportViolations)
    success: bool


class ReportArtifact(AnalysisReport):
    """``report.json`` artifact: the analysis report with a schema version."""

    schema_version: int = Field(default_factory=_artifact_schema_version)


__all__ = ["AnalysisReport", "ReportArtifact", "ReportSummary", "ReportViolations"]
