"""Console and JSON renderings of an analysis report."""

from __future__ import annotations

from typing import TYPE_CHECKING

import orjson

from metrics.distance import classify_zone
from utils import display_name

if TYPE_CHECKING:
    from artifacts.models.artifacts.metrics import ModuleMetrics
    from artifacts.models.artifacts.report import AnalysisReport, ReportSummary
    from rules.config import ArchmapConfig

_ZONE_LABELS = {
    "pain": " (Zone of Pain)",
    "uselessness": " (Zone of Uselessness)",
}
_TOP_COUPLING = 3
_TOP_DISTANCE = 5
_MAX_LISTED_VIOLATIONS = 5


def _zone_label(metric: ModuleMetrics) -> str:
    zone = classify_zone(metric.abstractness, metric.instability)
    return _ZONE_LABELS[zone] if zone else ""


def _summary_lines(summary: ReportSummary) -> list[str]:
    return [
        "",
        "Summary:",
        f"  Total modules: {summary.total_modules}",
        f"  Total imports: {summary.total_imports}",
        f"  Total exports: {summary.total_exports}",
        f"  Total classes: {summary.total_classes}",
        f"  Total interfaces: {summary.total_interfaces}",
        f"  Cycles detected: {summary.cycles_detected}",
    ]


def _cycle_lines(cycles: list[list[str]]) -> list[str]:
    if not cycles:
        return []
    lines = ["", "Cycles:"]
    for cycle in cycles:
        lines.append("  - " + " -> ".join(display_name(p) for p in cycle))
    return lines


def _coupling_lines(metrics: list[ModuleMetrics]) -> list[str]:
    if not metrics:
        return []
    # sorted() is stable: ties keep graph order
    by_ca = sorted(metrics, key=lambda m: -m.ca)[:_TOP_COUPLING]
    by_ce = sorted(metrics, key=lambda m: -m.ce)[:_TOP_COUPLING]

    lines = ["", "Top modules by Ca (afferent coupling):"]
    lines.extend(f"  - {display_name(m.file_path)}: Ca={m.ca}, Ce={m.ce}" for m in by_ca)
    lines.extend(["", "Top modules by Ce (efferent coupling):"])
    lines.extend(f"  - {display_name(m.file_path)}: Ca={m.ca}, Ce={m.ce}" for m in by_ce)
    return lines


def _distance_lines(metrics: list[ModuleMetrics]) -> list[str]:
    if not metrics:
        return []
    by_distance = sorted(metrics, key=lambda m: -m.distance)[:_TOP_DISTANCE]
    lines = ["", "Modules by distance from main sequence:"]
    for m in by_distance:
        lines.append(
            f"  - {display_name(m.file_path)}: D={m.distance:.2f}, "
            f"A={m.abstractness:.2f}, I={m.instability:.2f}{_zone_label(m)}"
        )
    return lines


def _threshold_lines(violations: list[ModuleMetrics], threshold: float) -> list[str]:
    if not violations:
        return []
    lines = [
        "",
        f"{len(violations)} module(s) exceed distance threshold ({threshold}):",
    ]
    for m in violations[:_MAX_LISTED_VIOLATIONS]:
        lines.append(f"  - {display_name(m.file_path)}: D={m.distance:.2f}")
    if len(violations) > _MAX_LISTED_VIOLATIONS:
        lines.append(f"  ... and {len(violations) - _MAX_LISTED_VIOLATIONS} more")
    return lines


def format_console_output(report: AnalysisReport, config: ArchmapConfig) -> str:
    """Render a human-readable report.

    Sections follow ``config.metrics.enabled``: ``cycles`` lists the cycles,
    ``coupling`` the top modules by Ca and Ce, ``distance`` the modules
    furthest from the main sequence. Summary and threshold violations are
    always shown.
    """
    enabled = set(config.metrics.enabled)
    lines = _summary_lines(report.summary)
    if "cycles" in enabled:
        lines.extend(_cycle_lines(report.violations.cycles))
    if "coupling" in enabled:
        lines.extend(_coupling_lines(report.metrics))
    if "distance" in enabled:
        lines.extend(_distance_lines(report.metrics))
    lines.extend(
        _threshold_lines(
            report.violations.threshold_exceeded,
            config.metrics.thresholds.distance,
        )
    )
    return "\n".join(lines) + "\n"


def format_json_output(report: AnalysisReport) -> str:
    """Render the report as indented JSON for CI consumption."""
    payload = {
        "success": report.success,
        "summary": report.summary.model_dump(),
        "metrics": [m.model_dump() for m in report.metrics],
        "violations": {
            "cycles": report.violations.cycles,
            "threshold_exceeded": [
                {
                    "file_path": m.file_path,
                    "distance": m.distance,
                    "abstractness": m.abstractness,
                    "instability": m.instability,
                }
                for m in report.violations.threshold_exceeded
            ],
        },
    }
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8")


__all__ = ["format_console_output", "format_json_output"]
