"""Per-module metrics artifact generator."""

from __future__ import annotations

from typing import TYPE_CHECKING

from artifacts.utils import _write_jsonl
from contract.artifacts import METRICS_JSONL

if TYPE_CHECKING:
    from pathlib import Path

    from analysis.pipeline import AnalysisResult


class MetricsGenerator:
    """Generates metrics.jsonl, one record per graph node in graph order."""

    @property
    def name(self) -> str:
        return "metrics"

    def generate(self, result: AnalysisResult, out_dir: Path) -> list[str]:
        out_dir.mkdir(parents=True, exist_ok=True)
        _write_jsonl(out_dir / METRICS_JSONL, result.metrics)
        return [METRICS_JSONL]


__all__ = ["MetricsGenerator"]
