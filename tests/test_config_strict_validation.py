from __future__ import annotations

from pathlib import Path

import pytest

from rules.config import ConfigError, load_config, load_config_file, resolve_output_dir


def _write_config(project_root: Path, toml_content: str) -> None:
    (project_root / "archmap.toml").write_text(toml_content, encoding="utf-8")


def test_missing_config_uses_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config.output_dir == ".archmap"
    assert config.metrics.thresholds.distance == 0.6
    assert config.metrics.enabled == ["coupling", "abstractness", "distance", "cycles"]
    assert config.ci.fail_on_threshold is True
    assert config.ci.fail_on_cycle is False
    assert config.ci.output_format == "console"


def test_empty_config_accepted(tmp_path: Path) -> None:
    _write_config(tmp_path, "")

    config = load_config(tmp_path)

    assert config.output_dir == ".archmap"


def test_valid_nested_config_accepted(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        """
output_dir = "build/archmap"

[metrics]
enabled = ["cycles", "distance"]

[metrics.thresholds]
distance = 0.4

[ci]
fail_on_cycle = true
fail_on_threshold = false
output_format = "json"
""".strip(),
    )

    config = load_config(tmp_path)

    assert config.output_dir == "build/archmap"
    assert config.metrics.enabled == ["cycles", "distance"]
    assert config.metrics.thresholds.distance == 0.4
    assert config.ci.fail_on_cycle is True
    assert config.ci.fail_on_threshold is False
    assert config.ci.output_format == "json"


def test_unknown_top_level_key_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "bogus_key = true")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_unknown_nested_key_rejected(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        """
[ci]
fail_on_cycle = true
bogus = true
""".strip(),
    )

    with pytest.raises(ConfigError):
        load_config(tmp_path)


@pytest.mark.parametrize("distance", ["-0.1", "1.5"])
def test_distance_threshold_out_of_range_rejected(tmp_path: Path, distance: str) -> None:
    _write_config(tmp_path, f"[metrics.thresholds]\ndistance = {distance}")

    with pytest.raises(ConfigError, match="Invalid config"):
        load_config(tmp_path)


def test_unknown_metric_name_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, '[metrics]\nenabled = ["cohesion"]')

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_invalid_toml_rejected(tmp_path: Path) -> None:
    _write_config(tmp_path, "output_dir = ")

    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(tmp_path)


def test_explicit_config_file_must_exist(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config_file(tmp_path / "nope.toml")


def test_explicit_config_file_loaded(tmp_path: Path) -> None:
    path = tmp_path / "custom.toml"
    path.write_text("[ci]\nfail_on_cycle = true\n", encoding="utf-8")

    assert load_config_file(path).ci.fail_on_cycle is True


@pytest.mark.parametrize("output_dir", ["", "~/out", "/abs/out", "../escape"])
def test_resolve_output_dir_rejects_unsafe_paths(tmp_path: Path, output_dir: str) -> None:
    with pytest.raises(ConfigError):
        resolve_output_dir(tmp_path, output_dir)


def test_resolve_output_dir_stays_inside_root(tmp_path: Path) -> None:
    assert resolve_output_dir(tmp_path, ".archmap") == (tmp_path / ".archmap").resolve()
