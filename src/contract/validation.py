"""Validation helpers for generated artifacts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

import orjson
from pydantic import BaseModel, ValidationError

from contract.artifacts import ARTIFACT_SCHEMA_VERSION, ARTIFACT_SPECS
from contract.models import CycleRecord, GraphArtifact, ModuleMetrics, ReportArtifact

if TYPE_CHECKING:
    from pathlib import Path


class _Model(Protocol):
    @classmethod
    def model_validate(cls, obj: Any) -> BaseModel: ...


@dataclass(frozen=True)
class ValidationMessage:
    artifact: str
    path: Path
    message: str
    line: int | None = None

    def location(self) -> str:
        if self.line is None:
            return str(self.path)
        return f"{self.path}:{self.line}"

    def to_dict(self) -> dict[str, object]:
        return {
            "artifact": self.artifact,
            "path": str(self.path),
            "line": self.line,
            "message": self.message,
        }


@dataclass
class ValidationResult:
    errors: list[ValidationMessage] = field(default_factory=list)
    warnings: list[ValidationMessage] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def error(
        self, artifact: str, path: Path, message: str, line: int | None = None
    ) -> None:
        self.errors.append(ValidationMessage(artifact, path, message, line))

    def warning(
        self, artifact: str, path: Path, message: str, line: int | None = None
    ) -> None:
        self.warnings.append(ValidationMessage(artifact, path, message, line))


_MODELS: dict[str, type[_Model]] = {
    "graph": GraphArtifact,
    "cycles": CycleRecord,
    "metrics": ModuleMetrics,
    "report": ReportArtifact,
}

_EDGE_SEPARATOR = " -> "


@dataclass
class _ArtifactCheck:
    """Validation context for one artifact file."""

    artifact: str
    path: Path
    result: ValidationResult
    strict_schema_version: bool
    model: type[_Model] | None = None
    # A schema version problem is reported once per file, not once per line.
    schema_reported: bool = False

    def error(self, message: str, line: int | None = None) -> None:
        self.result.error(self.artifact, self.path, message, line)

    def record(self, data: object, line: int | None = None) -> None:
        if self.model is None:
            self.error("No schema model registered for artifact.", line)
            return
        try:
            parsed = self.model.model_validate(data)
        except ValidationError as exc:
            self.error(f"Schema validation failed: {exc}.", line)
            return
        if "schema_version" in getattr(self.model, "model_fields", {}):
            self._schema_version(data, parsed, line)

    def _schema_version(self, data: object, parsed: BaseModel, line: int | None) -> None:
        if self.schema_reported:
            return
        if not isinstance(data, dict) or "schema_version" not in data:
            message = f"Missing schema_version; defaulted to {ARTIFACT_SCHEMA_VERSION}."
            if self.strict_schema_version:
                self.error(message, line)
            else:
                self.result.warning(self.artifact, self.path, message, line)
            self.schema_reported = True
            return

        found = getattr(parsed, "schema_version", ARTIFACT_SCHEMA_VERSION)
        if found != ARTIFACT_SCHEMA_VERSION:
            self.error(
                "Schema version mismatch: "
                f"expected {ARTIFACT_SCHEMA_VERSION}, got {found}.",
                line,
            )
            self.schema_reported = True


def validate_artifacts(
    artifacts_dir: Path, *, strict_schema_version: bool = False
) -> ValidationResult:
    """Check that every artifact exists and matches its schema.

    Problems are collected as messages rather than raised; ``strict_schema_version``
    turns a missing schema_version from a warning into an error.
    """
    result = ValidationResult()

    if not artifacts_dir.exists():
        result.error("artifacts_dir", artifacts_dir, "Artifacts directory does not exist.")
        return result
    if not artifacts_dir.is_dir():
        result.error("artifacts_dir", artifacts_dir, "Artifacts path is not a directory.")
        return result

    for artifact_name, spec in ARTIFACT_SPECS.items():
        check = _ArtifactCheck(
            artifact=artifact_name,
            path=artifacts_dir / spec.filename,
            result=result,
            strict_schema_version=strict_schema_version,
            model=_MODELS.get(artifact_name),
        )
        if not check.path.exists():
            check.error("Required artifact file is missing.")
            continue

        if spec.format == "jsonl":
            _validate_jsonl(check)
        elif spec.format == "json":
            _validate_json(check)
        elif spec.format == "edgelist":
            _validate_edgelist(check)
        else:
            check.error(f"Unsupported artifact format: {spec.format}.")

    return result


def _validate_jsonl(check: _ArtifactCheck) -> None:
    try:
        raw_lines = check.path.read_bytes().splitlines()
    except OSError as exc:
        check.error(f"Failed to read file: {exc}.")
        return

    for line_number, raw_line in enumerate(raw_lines, 1):
        if not raw_line.strip():
            continue
        try:
            data = orjson.loads(raw_line)
        except orjson.JSONDecodeError as exc:
            check.error(f"Invalid JSON: {exc}.", line_number)
            continue
        check.record(data, line_number)


def _validate_json(check: _ArtifactCheck) -> None:
    try:
        data = orjson.loads(check.path.read_bytes())
    except (OSError, orjson.JSONDecodeError) as exc:
        check.error(f"Invalid JSON: {exc}.")
        return

    if not isinstance(data, dict):
        check.error(f"Expected JSON object for {check.path.name}.")
        return
    check.record(data)


def _validate_edgelist(check: _ArtifactCheck) -> None:
    try:
        lines = check.path.read_text(encoding="utf-8").splitlines()
    except UnicodeDecodeError as exc:
        check.error(f"Failed to read file: invalid UTF-8 ({exc}).")
        return
    except OSError as exc:
        check.error(f"Failed to read file: {exc}.")
        return

    for line_number, raw_line in enumerate(lines, 1):
        line = raw_line.strip()
        if not line:
            continue
        source, sep, target = line.partition(_EDGE_SEPARATOR)
        if not sep:
            check.error(
                "Malformed edgelist line (expected 'source -> target').", line_number
            )
        elif not source.strip() or not target.strip():
            check.error("Malformed edgelist line (empty source or target).", line_number)


__all__ = [
    "ValidationMessage",
    "ValidationResult",
    "validate_artifacts",
]
