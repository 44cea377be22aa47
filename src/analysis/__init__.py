"""Analysis pipeline, report engine and report formatting."""

from analysis.formatting import format_console_output, format_json_output
from analysis.pipeline import AnalysisResult, analyze, analyze_file
from analysis.reporter import failure_reason, generate_report

__all__ = [
    "AnalysisResult",
    "analyze",
    "analyze_file",
    "failure_reason",
    "format_console_output",
    "format_json_output",
    "generate_report",
]
