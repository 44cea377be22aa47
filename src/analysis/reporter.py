"""Report engine: totals, violation classification and the pass/fail verdict."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from artifacts.models.artifacts.report import (
    AnalysisReport,
    ReportSummary,
    ReportViolations,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from artifacts.models.artifacts.metrics import ModuleMetrics
    from artifacts.models.artifacts.modules import ParsedModule
    from rules.config import ArchmapConfig

FailureReason = Literal["cycles", "threshold"]


def generate_report(
    modules: Sequence[ParsedModule],
    metrics: list[ModuleMetrics],
    cycles: list[list[str]],
    config: ArchmapConfig,
) -> AnalysisReport:
    """Aggregate totals and classify violations against the configured policy.

    Detection and enforcement are decoupled: cycles and threshold violations
    are always reported, but they only fail the run when the matching
    ``ci.fail_on_cycle`` / ``ci.fail_on_threshold`` gate is enabled. The
    distance threshold is a strict upper bound.
    """
    threshold = config.metrics.thresholds.distance
    threshold_exceeded = [m for m in metrics if m.distance > threshold]

    has_cycle_violation = config.ci.fail_on_cycle and len(cycles) > 0
    has_threshold_violation = (
        config.ci.fail_on_threshold and len(threshold_exceeded) > 0
    )

    summary = ReportSummary(
        total_modules=len(modules),
        total_imports=sum(len(m.imports) for m in modules),
        total_exports=sum(m.exported_count for m in modules),
        total_classes=sum(len(m.classes) for m in modules),
        total_interfaces=sum(m.interfaces for m in modules),
        cycles_detected=len(cycles),
    )

    return AnalysisReport(
        summary=summary,
        metrics=metrics,
        violations=ReportViolations(
            cycles=cycles,
            threshold_exceeded=threshold_exceeded,
        ),
        success=not has_cycle_violation and not has_threshold_violation,
    )


def failure_reason(report: AnalysisReport, config: ArchmapConfig) -> FailureReason | None:
    """Name the gate that failed the report; cycles take precedence."""
    if report.success:
        return None
    if config.ci.fail_on_cycle and report.violations.cycles:
        return "cycles"
    return "threshold"


__all__ = ["FailureReason", "failure_reason", "generate_report"]
