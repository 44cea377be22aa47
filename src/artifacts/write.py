from __future__ import annotations

from typing import TYPE_CHECKING

from analysis.pipeline import analyze_file
from artifacts.generators import (
    CyclesGenerator,
    DepsGenerator,
    MetricsGenerator,
    ReportGenerator,
)
from logging_utils import get_logger
from rules.config import load_config, resolve_output_dir

if TYPE_CHECKING:
    from pathlib import Path

    from rules.config import ArchmapConfig

logger = get_logger(__name__)


def generate_all_artifacts(
    *,
    root: Path,
    modules_path: Path,
    out_dir: Path | None = None,
    config: ArchmapConfig | None = None,
) -> dict[str, object]:
    """Analyze a modules file and write the deterministic artifacts.

    Args:
        root: Project root; holds archmap.toml and anchors the output dir
        modules_path: Parsed module records (.jsonl or .json)
        out_dir: Optional output directory for generated artifacts
        config: Optional configuration; loaded from root when omitted

    Returns:
        Dictionary with counts and list of generated artifact paths.
    """
    if config is None:
        config = load_config(root)

    if out_dir is None:
        out_dir = resolve_output_dir(root, config.output_dir)

    result = analyze_file(modules_path, config)

    artifacts_list: list[str] = []
    for generator in (
        DepsGenerator(),
        CyclesGenerator(),
        MetricsGenerator(),
        ReportGenerator(),
    ):
        written = generator.generate(result, out_dir)
        logger.debug("Generator %s wrote %s", generator.name, ", ".join(written))
        artifacts_list.extend(written)

    logger.info("Wrote %d artifacts to %s", len(artifacts_list), out_dir)

    return {
        "module_count": len(result.modules),
        "node_count": len(result.graph),
        "edge_count": result.graph.edge_count,
        "cycle_count": len(result.cycles),
        "success": result.report.success,
        "artifacts": [str(out_dir / name) for name in artifacts_list],
    }
