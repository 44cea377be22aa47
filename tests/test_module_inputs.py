from __future__ import annotations

from pathlib import Path

import orjson
import pytest

from contract.inputs import ModuleInputError, load_modules

FIXTURE_MODULES = Path(__file__).parent / "fixtures" / "mini_project" / "modules.jsonl"


def test_load_fixture_jsonl_accepts_snake_and_camel_case() -> None:
    modules = load_modules(FIXTURE_MODULES)

    assert [m.file_path for m in modules] == [
        "/proj/src/api.ts",
        "/proj/src/service.ts",
        "/proj/src/repo.ts",
        "/proj/src/types.ts",
    ]
    types_module = modules[3]
    assert types_module.total_types == 3
    assert types_module.interfaces == 2
    assert types_module.classes[0].is_abstract is True
    assert types_module.exported_count == 3


def test_load_json_array(tmp_path: Path) -> None:
    path = tmp_path / "modules.json"
    path.write_bytes(
        orjson.dumps(
            [
                {"file_path": "a.ts", "imports": ["b.ts"]},
                {"file_path": "b.ts"},
            ]
        )
    )

    modules = load_modules(path)

    assert [m.file_path for m in modules] == ["a.ts", "b.ts"]
    assert modules[0].imports == ["b.ts"]
    assert modules[1].total_types == 0


def test_load_json_object_with_modules_key(tmp_path: Path) -> None:
    path = tmp_path / "snapshot.json"
    path.write_bytes(orjson.dumps({"version": "1.0.0", "modules": [{"filePath": "a.ts"}]}))

    assert [m.file_path for m in load_modules(path)] == ["a.ts"]


def test_total_types_defaults_to_classes_plus_interfaces(tmp_path: Path) -> None:
    path = tmp_path / "modules.jsonl"
    path.write_text(
        '{"file_path": "a.ts", "classes": [{"name": "A"}, {"name": "B"}], "interfaces": 3}\n',
        encoding="utf-8",
    )

    (module,) = load_modules(path)

    assert module.total_types == 5


def test_blank_lines_are_skipped(tmp_path: Path) -> None:
    path = tmp_path / "modules.jsonl"
    path.write_text('\n{"file_path": "a.ts"}\n\n{"file_path": "b.ts"}\n', encoding="utf-8")

    assert len(load_modules(path)) == 2


def test_invalid_json_line_reports_line_number(tmp_path: Path) -> None:
    path = tmp_path / "modules.jsonl"
    path.write_text('{"file_path": "a.ts"}\n{not json}\n', encoding="utf-8")

    with pytest.raises(ModuleInputError) as excinfo:
        load_modules(path)

    assert excinfo.value.line == 2
    assert excinfo.value.location() == f"{path}:2"
    assert "Invalid JSON" in str(excinfo.value)


def test_invalid_record_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "modules.jsonl"
    path.write_text('{"file_path": "a.ts", "interfaces": -1}\n', encoding="utf-8")

    with pytest.raises(ModuleInputError, match="Invalid module record"):
        load_modules(path)


def test_empty_identifier_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "modules.jsonl"
    path.write_text('{"file_path": ""}\n', encoding="utf-8")

    with pytest.raises(ModuleInputError):
        load_modules(path)


def test_json_must_be_array_or_modules_object(tmp_path: Path) -> None:
    path = tmp_path / "modules.json"
    path.write_text('{"file_path": "a.ts"}', encoding="utf-8")

    with pytest.raises(ModuleInputError, match="Expected a JSON array"):
        load_modules(path)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ModuleInputError, match="Failed to read modules file"):
        load_modules(tmp_path / "missing.jsonl")
