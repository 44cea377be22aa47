"""Analysis pipeline: parsed modules -> graph -> cycles -> metrics -> report."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from analysis.reporter import generate_report
from contract.inputs import load_modules
from graph.algos import find_cycles
from graph.dependency_graph import DependencyGraph
from logging_utils import get_logger
from metrics import compute_all_metrics
from rules.config import ArchmapConfig

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from artifacts.models.artifacts.metrics import ModuleMetrics
    from artifacts.models.artifacts.modules import ParsedModule
    from artifacts.models.artifacts.report import AnalysisReport

logger = get_logger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    """Everything one analysis run produced."""

    modules: list[ParsedModule]
    graph: DependencyGraph
    cycles: list[list[str]]
    metrics: list[ModuleMetrics]
    report: AnalysisReport
    config: ArchmapConfig


def analyze(
    modules: Sequence[ParsedModule],
    config: ArchmapConfig | None = None,
) -> AnalysisResult:
    """Run the full analysis over already-parsed modules.

    Every call builds its own graph, cycle list and metrics, so concurrent
    runs over different inputs share no state.
    """
    if config is None:
        config = ArchmapConfig()
    modules = list(modules)

    logger.info("Building dependency graph from %d modules...", len(modules))
    graph = DependencyGraph(modules)
    logger.debug("Graph has %d nodes and %d edges", len(graph), graph.edge_count)

    logger.info("Detecting cycles...")
    cycles = find_cycles(graph)
    logger.info("Found %d cycle(s)", len(cycles))

    logger.info("Computing metrics...")
    metrics = compute_all_metrics(graph, modules, cycles)

    report = generate_report(modules, metrics, cycles, config)
    logger.debug(
        "Report: success=%s, %d module(s) over distance threshold %.2f",
        report.success,
        len(report.violations.threshold_exceeded),
        config.metrics.thresholds.distance,
    )

    return AnalysisResult(
        modules=modules,
        graph=graph,
        cycles=cycles,
        metrics=metrics,
        report=report,
        config=config,
    )


def analyze_file(
    modules_path: Path,
    config: ArchmapConfig | None = None,
) -> AnalysisResult:
    """Load parsed modules from a file and analyze them."""
    logger.info("Loading modules from %s", modules_path)
    modules = load_modules(modules_path)
    return analyze(modules, config)


__all__ = ["AnalysisResult", "analyze", "analyze_file"]
