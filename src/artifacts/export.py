"""Export of full analysis snapshots to JSON."""

from __future__ import annotations

from typing import TYPE_CHECKING

from artifacts.serialization import to_serializable
from artifacts.utils import _dumps
from logging_utils import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from analysis.pipeline import AnalysisResult

logger = get_logger(__name__)


def export_to_json(
    result: AnalysisResult,
    *,
    pretty: bool = True,
    timestamp: str | None = None,
) -> str:
    """Return the analysis snapshot as a JSON string.

    Args:
        result: Analysis result to export
        pretty: Indent the output (2 spaces) when true, compact otherwise
        timestamp: Optional fixed timestamp; defaults to now (UTC)
    """
    snapshot = to_serializable(result, timestamp=timestamp)
    return _dumps(snapshot, pretty=pretty).decode("utf-8")


def export_to_file(
    result: AnalysisResult,
    path: Path,
    *,
    pretty: bool = True,
    timestamp: str | None = None,
) -> Path:
    """Write the analysis snapshot to ``path`` and return the resolved path."""
    path = path.expanduser().resolve()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        export_to_json(result, pretty=pretty, timestamp=timestamp),
        encoding="utf-8",
    )
    logger.info("Analysis exported to %s", path)
    return path


__all__ = ["export_to_file", "export_to_json"]
