from __future__ import annotations


def compute_instability(ca: int, ce: int) -> float:
    """Instability = Ce / (Ca + Ce); an isolated module is stable (0)."""
    total = ca + ce
    return 0.0 if total == 0 else ce / total


__all__ = ["compute_instability"]
