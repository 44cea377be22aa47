from __future__ import annotations

from pathlib import Path
from typing import Literal

import tomllib
from pydantic import BaseModel, ConfigDict, Field

CONFIG_FILENAME = "archmap.toml"

MetricName = Literal["coupling", "abstractness", "distance", "cycles"]
OutputFormat = Literal["console", "json"]

DEFAULT_ENABLED_METRICS: list[MetricName] = [
    "coupling",
    "abstractness",
    "distance",
    "cycles",
]


class ThresholdsConfig(BaseModel):
    """Thresholds that classify modules as violations."""

    model_config = ConfigDict(extra="forbid")

    distance: float = Field(
        default=0.6,
        ge=0.0,
        le=1.0,
        description="Maximum allowed distance from the main sequence",
    )


class MetricsConfig(BaseModel):
    """Configuration for metric reporting."""

    model_config = ConfigDict(extra="forbid")

    enabled: list[MetricName] = Field(
        default_factory=lambda: list(DEFAULT_ENABLED_METRICS),
        description="Metric sections shown in console output",
    )
    thresholds: ThresholdsConfig = Field(
        default_factory=ThresholdsConfig,
        description="Violation thresholds",
    )


class CIConfig(BaseModel):
    """Policy gates and output format for CI runs."""

    model_config = ConfigDict(extra="forbid")

    fail_on_threshold: bool = Field(
        default=True,
        description="Fail when any module exceeds the distance threshold",
    )
    fail_on_cycle: bool = Field(
        default=False,
        description="Fail when any dependency cycle is detected",
    )
    output_format: OutputFormat = Field(
        default="console",
        description="Report output format",
    )


class ArchmapConfig(BaseModel):
    """Configuration for archmap analysis runs."""

    model_config = ConfigDict(extra="forbid")

    output_dir: str = Field(
        default=".archmap",
        description="Output directory for generated artifacts",
    )
    metrics: MetricsConfig = Field(
        default_factory=MetricsConfig,
        description="Metric reporting and thresholds",
    )
    ci: CIConfig = Field(
        default_factory=CIConfig,
        description="Policy gates for pass/fail verdicts",
    )


class ConfigError(Exception):
    """Raised when a config file cannot be found, parsed or validated."""


def resolve_output_dir(root: Path, output_dir: str) -> Path:
    """Resolve a config-provided output_dir safely within the project root.

    The config output_dir must be a non-empty relative path that remains
    within the project root after resolution. Absolute paths and paths
    that escape the root are rejected.
    """
    if not output_dir:
        msg = "output_dir must be a non-empty relative path"
        raise ConfigError(msg)

    if output_dir.startswith("~"):
        msg = "output_dir must be a relative path within the project root"
        raise ConfigError(msg)

    output_path = Path(output_dir)
    if output_path.is_absolute():
        msg = "output_dir must be a relative path within the project root"
        raise ConfigError(msg)

    try:
        resolved_root = root.resolve()
        resolved_output = (resolved_root / output_path).resolve()
    except OSError as exc:
        msg = f"Failed to resolve output_dir '{output_dir}': {exc}"
        raise ConfigError(msg) from exc

    try:
        resolved_output.relative_to(resolved_root)
    except ValueError as exc:
        msg = f"output_dir '{output_dir}' escapes the project root"
        raise ConfigError(msg) from exc

    return resolved_output


def _read_config(config_path: Path) -> ArchmapConfig:
    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e
    except OSError as e:
        msg = f"Failed to read config file {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return ArchmapConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e


def load_config(root: Path) -> ArchmapConfig:
    """Load configuration from archmap.toml in root if it exists."""
    config_path = Path(root) / CONFIG_FILENAME

    if not config_path.is_file():
        return ArchmapConfig()

    return _read_config(config_path)


def load_config_file(path: Path) -> ArchmapConfig:
    """Load configuration from an explicit path; the file must exist."""
    config_path = Path(path).expanduser().resolve()
    if not config_path.is_file():
        msg = f"Config file not found: {config_path}"
        raise ConfigError(msg)
    return _read_config(config_path)
