"""Dependency graph and cycle detection."""

from graph.algos import find_cycles
from graph.dependency_graph import DependencyGraph, DependencyNode

__all__ = ["DependencyGraph", "DependencyNode", "find_cycles"]
