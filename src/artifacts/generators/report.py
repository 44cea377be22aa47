"""Report artifact generator."""

from __future__ import annotations

from typing import TYPE_CHECKING

from artifacts.models.artifacts.report import ReportArtifact
from artifacts.utils import _write_json
from contract.artifacts import REPORT_JSON

if TYPE_CHECKING:
    from pathlib import Path

    from analysis.pipeline import AnalysisResult


class ReportGenerator:
    """Generates report.json: totals, violations and the verdict."""

    @property
    def name(self) -> str:
        return "report"

    def generate(self, result: AnalysisResult, out_dir: Path) -> list[str]:
        out_dir.mkdir(parents=True, exist_ok=True)
        artifact = ReportArtifact.model_validate(result.report.model_dump())
        _write_json(out_dir / REPORT_JSON, artifact)
        return [REPORT_JSON]


__all__ = ["ReportGenerator"]
