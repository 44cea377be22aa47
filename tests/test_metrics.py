from __future__ import annotations

import pytest

from artifacts.models.artifacts.metrics import ModuleMetrics
from artifacts.models.artifacts.modules import ParsedClass, ParsedModule
from graph.algos import find_cycles
from graph.dependency_graph import DependencyGraph
from metrics import (
    classify_zone,
    compute_abstractness,
    compute_all_metrics,
    compute_coupling_metrics,
    compute_distance,
    compute_instability,
)


def _module(file_path: str, *imports: str, **kwargs: object) -> ParsedModule:
    return ParsedModule.model_validate(
        {"file_path": file_path, "imports": list(imports), **kwargs}
    )


def _metrics_by_path(modules: list[ParsedModule]) -> dict[str, ModuleMetrics]:
    graph = DependencyGraph(modules)
    cycles = find_cycles(graph)
    return {m.file_path: m for m in compute_all_metrics(graph, modules, cycles)}


def test_chain_coupling_counts() -> None:
    by_path = _metrics_by_path([_module("a", "b"), _module("b", "c"), _module("c")])

    assert (by_path["a"].ca, by_path["a"].ce) == (0, 1)
    assert (by_path["b"].ca, by_path["b"].ce) == (1, 1)
    assert (by_path["c"].ca, by_path["c"].ce) == (1, 0)
    assert all(m.cycles == [] for m in by_path.values())


def test_two_cycle_is_listed_on_both_members() -> None:
    by_path = _metrics_by_path([_module("a", "b"), _module("b", "a")])

    assert len(by_path["a"].cycles) == 1
    assert by_path["a"].cycles == by_path["b"].cycles
    assert set(by_path["a"].cycles[0]) == {"a", "b"}


def test_abstractness_counts_interfaces_and_abstract_classes() -> None:
    module = ParsedModule(
        file_path="a",
        classes=[
            ParsedClass(name="Base", is_abstract=True),
            ParsedClass(name="Impl"),
            ParsedClass(name="Other"),
        ],
        interfaces=1,
    )

    assert module.total_types == 4
    assert compute_abstractness(module) == pytest.approx(0.5)


def test_two_interfaces_and_two_concrete_classes_is_half_abstract() -> None:
    module = ParsedModule(
        file_path="a",
        classes=[ParsedClass(name="One"), ParsedClass(name="Two")],
        interfaces=2,
        total_types=4,
    )

    assert compute_abstractness(module) == pytest.approx(0.5)


def test_abstractness_is_zero_without_types() -> None:
    assert compute_abstractness(ParsedModule(file_path="a")) == 0.0


def test_instability_guards_isolated_module() -> None:
    assert compute_instability(0, 0) == 0.0
    assert compute_instability(0, 3) == 1.0
    assert compute_instability(3, 0) == 0.0
    assert compute_instability(1, 3) == pytest.approx(0.75)


@pytest.mark.parametrize(
    ("abstractness", "instability", "expected"),
    [
        (0.0, 1.0, 0.0),
        (1.0, 0.0, 0.0),
        (0.5, 0.5, 0.0),
        (0.25, 0.75, 0.0),
        (0.0, 0.0, 1.0),
        (1.0, 1.0, 1.0),
        (0.5, 0.0, 0.5),
    ],
)
def test_distance_from_main_sequence(
    abstractness: float, instability: float, expected: float
) -> None:
    assert compute_distance(abstractness, instability) == pytest.approx(expected)


def test_classify_zone() -> None:
    assert classify_zone(0.0, 0.0) == "pain"
    assert classify_zone(1.0, 1.0) == "uselessness"
    assert classify_zone(0.5, 0.5) is None
    assert classify_zone(0.0, 1.0) is None


def test_import_only_node_uses_graph_coupling_and_zero_abstractness() -> None:
    by_path = _metrics_by_path([_module("a", "lib")])

    lib = by_path["lib"]
    assert (lib.ca, lib.ce) == (1, 0)
    assert lib.abstractness == 0.0
    assert lib.instability == 0.0
    assert lib.distance == 1.0


def test_duplicate_module_records_last_one_wins_for_abstractness() -> None:
    by_path = _metrics_by_path(
        [
            _module("a", "b", interfaces=1),
            _module("a", "c", classes=[{"name": "Impl"}]),
        ]
    )

    assert by_path["a"].abstractness == 0.0
    assert by_path["a"].ce == 2


def test_metric_values_stay_in_unit_interval() -> None:
    modules = [
        _module("a", "b", "c", interfaces=2, classes=[{"name": "X"}]),
        _module("b", "c", classes=[{"name": "Y", "is_abstract": True}]),
        _module("c", "a", "ext"),
        _module("d"),
    ]

    for metric in _metrics_by_path(modules).values():
        assert 0.0 <= metric.abstractness <= 1.0
        assert 0.0 <= metric.instability <= 1.0
        assert 0.0 <= metric.distance <= 1.0


def test_metrics_follow_graph_order() -> None:
    modules = [_module("z", "y"), _module("a")]
    graph = DependencyGraph(modules)

    metrics = compute_all_metrics(graph, modules, find_cycles(graph))

    assert [m.file_path for m in metrics] == ["z", "a", "y"]


def test_coupling_metrics_only_fill_ca_ce_and_cycles() -> None:
    modules = [_module("a", "b"), _module("b", "a")]
    graph = DependencyGraph(modules)

    metrics = compute_coupling_metrics(graph, find_cycles(graph))

    assert [(m.file_path, m.ca, m.ce) for m in metrics] == [("a", 1, 1), ("b", 1, 1)]
    assert all(len(m.cycles) == 1 for m in metrics)
    assert all(m.distance == 0.0 for m in metrics)


def test_pipeline_is_idempotent() -> None:
    modules = [_module("a", "b"), _module("b", "c", "a"), _module("c", "d")]

    assert _metrics_by_path(modules) == _metrics_by_path(modules)
