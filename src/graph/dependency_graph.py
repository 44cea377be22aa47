"""Module dependency graph built from parsed module records."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from artifacts.models.artifacts.modules import ParsedModule


@dataclass(frozen=True)
class DependencyNode:
    """A module in the dependency graph with its outgoing and incoming edges."""

    file_path: str
    dependencies: frozenset[str]
    dependents: frozenset[str]


class DependencyGraph:
    """Directed graph of import relationships between modules.

    A node exists for every scanned module and for every import target, so
    unresolved imports show up as bare nodes without outgoing edges. Nodes
    are enumerated in insertion order: all modules in input order first,
    then import targets as their edges are added.

    The graph is built once from the module list and is read-only afterwards.
    """

    def __init__(self, modules: Iterable[ParsedModule]) -> None:
        modules = list(modules)
        dependencies: dict[str, set[str]] = {}
        dependents: dict[str, set[str]] = {}

        def add_node(file_path: str) -> None:
            if file_path not in dependencies:
                dependencies[file_path] = set()
                dependents[file_path] = set()

        for module in modules:
            add_node(module.file_path)

        for module in modules:
            for import_path in module.imports:
                add_node(import_path)
                dependencies[module.file_path].add(import_path)
                dependents[import_path].add(module.file_path)

        self._nodes: dict[str, DependencyNode] = {
            file_path: DependencyNode(
                file_path=file_path,
                dependencies=frozenset(deps),
                dependents=frozenset(dependents[file_path]),
            )
            for file_path, deps in dependencies.items()
        }

    def get_node(self, file_path: str) -> DependencyNode | None:
        return self._nodes.get(file_path)

    def get_all_nodes(self) -> list[DependencyNode]:
        return list(self._nodes.values())

    def edges(self) -> list[tuple[str, str]]:
        """Return every (source, target) edge, sorted and unique."""
        return sorted(
            (node.file_path, target)
            for node in self._nodes.values()
            for target in node.dependencies
        )

    @property
    def edge_count(self) -> int:
        return sum(len(node.dependencies) for node in self._nodes.values())

    def __contains__(self, file_path: object) -> bool:
        return file_path in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)


__all__ = ["DependencyGraph", "DependencyNode"]
