"""Cycle artifact generator."""

from __future__ import annotations

from typing import TYPE_CHECKING

from artifacts.serialization import normalize_cycle
from artifacts.utils import _write_jsonl
from contract.artifacts import CYCLES_JSONL

if TYPE_CHECKING:
    from pathlib import Path

    from analysis.pipeline import AnalysisResult


class CyclesGenerator:
    """Generates cycles.jsonl with normalized, id-tagged cycles."""

    @property
    def name(self) -> str:
        return "cycles"

    def generate(self, result: AnalysisResult, out_dir: Path) -> list[str]:
        out_dir.mkdir(parents=True, exist_ok=True)

        records = [normalize_cycle(cycle) for cycle in result.cycles]
        records.sort(key=lambda record: (record.nodes, record.id))

        _write_jsonl(out_dir / CYCLES_JSONL, records)
        return [CYCLES_JSONL]


__all__ = ["CyclesGenerator"]
