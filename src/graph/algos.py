"""Graph algorithms for dependency analysis."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graph.dependency_graph import DependencyGraph


class _TarjanState:
    """Mutable state container for Tarjan's SCC algorithm."""

    def __init__(self) -> None:
        self.index = 0
        self.indices: dict[str, int] = {}
        self.low_link: dict[str, int] = {}
        self.on_stack: set[str] = set()
        self.stack: list[str] = []
        self.sccs: list[list[str]] = []

    def visit(self, node: str) -> None:
        self.indices[node] = self.index
        self.low_link[node] = self.index
        self.index += 1
        self.stack.append(node)
        self.on_stack.add(node)


def _extract_scc(state: _TarjanState, root: str) -> list[str]:
    """Extract a strongly connected component from the stack."""
    scc: list[str] = []
    while state.stack:
        w = state.stack.pop()
        state.on_stack.remove(w)
        scc.append(w)
        if w == root:
            break
    if root not in scc:
        msg = (
            f"Tarjan algorithm invariant violated: root node {root!r} "
            "not found in stack during SCC extraction."
        )
        raise RuntimeError(msg)
    return scc


def _neighbors(graph: DependencyGraph, node: str) -> Iterator[str]:
    graph_node = graph.get_node(node)
    if graph_node is None:
        return iter(())
    return iter(sorted(graph_node.dependencies))


def _strongconnect(root: str, graph: DependencyGraph, state: _TarjanState) -> None:
    """Process every node reachable from root in Tarjan's algorithm.

    Uses an explicit call stack of (node, neighbor iterator) frames instead
    of recursion so deep import chains cannot exhaust the interpreter stack.
    """
    state.visit(root)
    call_stack: list[tuple[str, Iterator[str]]] = [(root, _neighbors(graph, root))]

    while call_stack:
        node, neighbors = call_stack[-1]
        descended = False
        for neighbor in neighbors:
            if neighbor not in state.indices:
                state.visit(neighbor)
                call_stack.append((neighbor, _neighbors(graph, neighbor)))
                descended = True
                break
            if neighbor in state.on_stack:
                state.low_link[node] = min(state.low_link[node], state.indices[neighbor])

        if descended:
            continue

        call_stack.pop()
        if call_stack:
            caller = call_stack[-1][0]
            state.low_link[caller] = min(state.low_link[caller], state.low_link[node])

        if state.low_link[node] == state.indices[node]:
            scc = _extract_scc(state, node)
            if len(scc) > 1:
                state.sccs.append(scc)


def find_cycles(graph: DependencyGraph) -> list[list[str]]:
    """Find dependency cycles using Tarjan's algorithm.

    Roots are visited in node enumeration order and neighbors in sorted
    order, so identical input always yields identical output. Only
    components with two or more modules are reported; a module importing
    itself is not a cycle on its own.

    Args:
        graph: Dependency graph to analyze

    Returns:
        List of cycles, where each cycle lists its modules in the order they
        were popped off the Tarjan stack (the component root comes last)
    """
    state = _TarjanState()

    for node in graph.get_all_nodes():
        if node.file_path not in state.indices:
            _strongconnect(node.file_path, graph, state)

    return state.sccs


__all__ = [
    "find_cycles",
]
