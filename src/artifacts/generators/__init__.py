"""Deterministic artifact generators for archmap."""

from artifacts.generators.cycles import CyclesGenerator
from artifacts.generators.deps import DepsGenerator
from artifacts.generators.metrics import MetricsGenerator
from artifacts.generators.report import ReportGenerator

__all__ = [
    "CyclesGenerator",
    "DepsGenerator",
    "MetricsGenerator",
    "ReportGenerator",
]
