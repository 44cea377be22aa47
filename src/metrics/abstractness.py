from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from artifacts.models.artifacts.modules import ParsedModule


def compute_abstractness(module: ParsedModule) -> float:
    """Return the share of abstract types among a module's declared types.

    Interfaces always count as abstract; classes only when flagged abstract.
    A module without types has abstractness 0.
    """
    if module.total_types == 0:
        return 0.0
    abstract_types = module.interfaces + module.abstract_class_count
    return abstract_types / module.total_types


__all__ = ["compute_abstractness"]
