"""Distance from the main sequence (A + I = 1)."""

from __future__ import annotations

from typing import Literal

Zone = Literal["pain", "uselessness"]


def compute_distance(abstractness: float, instability: float) -> float:
    """Return |A + I - 1|.

    0 lies on the main sequence; 1 is reached at the two degenerate corners:
    concrete and stable (zone of pain), abstract and unstable (zone of
    uselessness).
    """
    return abs(abstractness + instability - 1)


def classify_zone(abstractness: float, instability: float) -> Zone | None:
    if abstractness < 0.5 and instability < 0.5:
        return "pain"
    if abstractness > 0.5 and instability > 0.5:
        return "uselessness"
    return None


__all__ = ["Zone", "classify_zone", "compute_distance"]
