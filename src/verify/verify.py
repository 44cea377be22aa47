"""Determinism verification for archmap artifacts."""

from __future__ import annotations

import filecmp
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from artifacts.write import generate_all_artifacts
from logging_utils import get_logger

if TYPE_CHECKING:
    from rules.config import ArchmapConfig

logger = get_logger(__name__)


@dataclass(frozen=True)
class DeterminismResult:
    ok: bool
    mismatches: tuple[str, ...] = field(default_factory=tuple)
    missing: tuple[str, ...] = field(default_factory=tuple)
    extra: tuple[str, ...] = field(default_factory=tuple)


def _relative_files(root: Path) -> set[Path]:
    return {path.relative_to(root) for path in root.rglob("*") if path.is_file()}


def compare_artifact_dirs(existing: Path, regenerated: Path) -> DeterminismResult:
    """Compare two artifact trees by relative path and byte content.

    ``missing`` lists files present in ``existing`` that regeneration did not
    produce; ``extra`` lists regenerated files absent from ``existing``.
    """
    existing_files = _relative_files(existing)
    regenerated_files = _relative_files(regenerated)

    mismatches = [
        str(path)
        for path in sorted(existing_files & regenerated_files)
        if not filecmp.cmp(existing / path, regenerated / path, shallow=False)
    ]
    missing = sorted(str(path) for path in existing_files - regenerated_files)
    extra = sorted(str(path) for path in regenerated_files - existing_files)

    return DeterminismResult(
        ok=not (mismatches or missing or extra),
        mismatches=tuple(mismatches),
        missing=tuple(missing),
        extra=tuple(extra),
    )


def verify_determinism(
    *,
    root: Path,
    modules_path: Path,
    artifacts_dir: Path,
    config: ArchmapConfig | None = None,
) -> DeterminismResult:
    """Verify that archmap artifacts are reproducible from the modules file.

    Regenerates the artifacts into a temporary directory and compares them
    byte-for-byte against ``artifacts_dir``.

    Args:
        root: Project root (config lookup).
        modules_path: Parsed module records the artifacts were built from.
        artifacts_dir: Directory containing existing artifacts to verify.
        config: Optional configuration; loaded from root when omitted.

    Raises:
        FileNotFoundError: If artifacts_dir does not exist.
        NotADirectoryError: If artifacts_dir is not a directory.
    """
    if not artifacts_dir.exists():
        msg = f"Artifacts directory does not exist: {artifacts_dir}"
        raise FileNotFoundError(msg)
    if not artifacts_dir.is_dir():
        msg = f"Artifacts path is not a directory: {artifacts_dir}"
        raise NotADirectoryError(msg)

    with tempfile.TemporaryDirectory(prefix="archmap-verify-") as temp_dir:
        regenerated_dir = Path(temp_dir)
        generate_all_artifacts(
            root=root,
            modules_path=modules_path,
            out_dir=regenerated_dir,
            config=config,
        )
        result = compare_artifact_dirs(artifacts_dir, regenerated_dir)

    if result.ok:
        logger.info("Artifacts in %s are reproducible", artifacts_dir)
    else:
        logger.warning(
            "Artifacts differ: %d mismatched, %d missing, %d extra",
            len(result.mismatches),
            len(result.missing),
            len(result.extra),
        )
    return result


__all__ = ["DeterminismResult", "compare_artifact_dirs", "verify_determinism"]
