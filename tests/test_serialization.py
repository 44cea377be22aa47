from __future__ import annotations

import hashlib
from pathlib import Path

import orjson

from analysis.pipeline import analyze
from artifacts.export import export_to_file, export_to_json
from artifacts.models.artifacts.modules import ParsedModule
from artifacts.serialization import normalize_cycle, serialize_graph, to_serializable
from graph.dependency_graph import DependencyGraph


def _modules() -> list[ParsedModule]:
    return [
        ParsedModule(file_path="src/b.ts", imports=["src/c.ts"]),
        ParsedModule(file_path="src/c.ts", imports=["src/a.ts"]),
        ParsedModule(file_path="src/a.ts", imports=["src/b.ts", "lib/x.ts"]),
    ]


def test_normalize_cycle_rotates_to_smallest_identifier() -> None:
    record = normalize_cycle(["src/c.ts", "src/a.ts", "src/b.ts"])

    assert record.nodes == ["src/a.ts", "src/b.ts", "src/c.ts"]
    assert record.length == 3


def test_normalize_cycle_id_is_rotation_independent() -> None:
    first = normalize_cycle(["b", "c", "a"])
    second = normalize_cycle(["c", "a", "b"])

    expected = hashlib.sha256(b"a|b|c").hexdigest()[:16]
    assert first.id == second.id == expected
    assert first.nodes == second.nodes == ["a", "b", "c"]


def test_normalize_empty_cycle() -> None:
    record = normalize_cycle([])

    assert (record.id, record.nodes, record.length) == ("", [], 0)


def test_serialize_graph_sorts_edges_and_keeps_node_order() -> None:
    graph = DependencyGraph(
        [
            ParsedModule(file_path="m", imports=["z", "a"]),
            ParsedModule(file_path="a", imports=["m"]),
        ]
    )

    artifact = serialize_graph(graph)

    assert [n.file_path for n in artifact.nodes] == ["m", "a", "z"]
    assert artifact.nodes[0].dependencies == ["a", "z"]
    assert artifact.nodes[0].dependents == ["a"]
    assert artifact.node_count == 3
    assert artifact.edge_count == 3


def test_to_serializable_collects_every_stage() -> None:
    result = analyze(_modules())

    snapshot = to_serializable(result, timestamp="2024-01-01T00:00:00Z")

    assert snapshot.version == "1.0.0"
    assert snapshot.timestamp == "2024-01-01T00:00:00Z"
    assert len(snapshot.modules) == 3
    assert [n.file_path for n in snapshot.graph.nodes] == [
        "src/b.ts",
        "src/c.ts",
        "src/a.ts",
        "lib/x.ts",
    ]
    assert len(snapshot.cycles) == 1
    assert snapshot.cycles[0].nodes[0] == "src/a.ts"
    assert snapshot.metrics == result.metrics
    assert snapshot.report == result.report


def test_to_serializable_defaults_to_utc_timestamp() -> None:
    snapshot = to_serializable(analyze(_modules()))

    assert snapshot.timestamp.endswith("Z")


def test_export_to_json_pretty_and_compact() -> None:
    result = analyze(_modules())

    pretty = export_to_json(result, timestamp="t")
    compact = export_to_json(result, pretty=False, timestamp="t")

    assert "\n" in pretty
    assert "\n" not in compact
    assert orjson.loads(pretty) == orjson.loads(compact)


def test_export_to_json_is_stable_for_fixed_timestamp() -> None:
    first = export_to_json(analyze(_modules()), timestamp="t")
    second = export_to_json(analyze(_modules()), timestamp="t")

    assert first == second


def test_export_to_file_writes_snapshot(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "snapshot.json"

    written = export_to_file(analyze(_modules()), target, timestamp="t")

    assert written == target.resolve()
    payload = orjson.loads(target.read_bytes())
    assert set(payload) == {
        "config",
        "cycles",
        "graph",
        "metrics",
        "modules",
        "report",
        "timestamp",
        "version",
    }
    assert payload["cycles"][0]["length"] == 3
    assert payload["modules"][0]["file_path"] == "src/b.ts"
