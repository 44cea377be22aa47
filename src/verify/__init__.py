"""Determinism verification for archmap artifacts."""

from verify.verify import DeterminismResult, compare_artifact_dirs, verify_determinism

__all__ = ["DeterminismResult", "compare_artifact_dirs", "verify_determinism"]
