"""Loading of parsed module records produced by the upstream parser."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import orjson
from pydantic import ValidationError

from artifacts.models.artifacts.modules import ParsedModule
from logging_utils import get_logger

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)


class ModuleInputError(Exception):
    """Raised when a modules file cannot be read or holds invalid records."""

    def __init__(self, path: Path, message: str, line: int | None = None) -> None:
        self.path = path
        self.line = line
        self.message = message
        super().__init__(f"{self.location()}: {message}")

    def location(self) -> str:
        if self.line is None:
            return str(self.path)
        return f"{self.path}:{self.line}"


def _validate_record(path: Path, data: Any, line: int | None) -> ParsedModule:
    try:
        return ParsedModule.model_validate(data)
    except ValidationError as exc:
        raise ModuleInputError(path, f"Invalid module record: {exc}", line) from exc


def _load_jsonl(path: Path, raw: bytes) -> list[ParsedModule]:
    modules: list[ParsedModule] = []
    for line_number, raw_line in enumerate(raw.splitlines(), 1):
        line = raw_line.strip()
        if not line:
            continue
        try:
            data = orjson.loads(line)
        except orjson.JSONDecodeError as exc:
            raise ModuleInputError(path, f"Invalid JSON: {exc}", line_number) from exc
        modules.append(_validate_record(path, data, line_number))
    return modules


def _load_json(path: Path, raw: bytes) -> list[ParsedModule]:
    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise ModuleInputError(path, f"Invalid JSON: {exc}") from exc

    if isinstance(data, dict) and isinstance(data.get("modules"), list):
        data = data["modules"]
    if not isinstance(data, list):
        msg = "Expected a JSON array of module records or an object with 'modules'"
        raise ModuleInputError(path, msg)

    return [_validate_record(path, record, None) for record in data]


def load_modules(path: Path) -> list[ParsedModule]:
    """Load parsed module records from a ``.jsonl`` or ``.json`` file.

    JSON Lines files hold one record per line (blank lines are skipped).
    JSON files hold an array of records, or an object with a ``modules``
    array such as an exported analysis snapshot.

    Raises:
        ModuleInputError: If the file is missing, unreadable, or holds a
            record that fails validation.
    """
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise ModuleInputError(path, f"Failed to read modules file: {exc}") from exc

    if path.suffix == ".jsonl":
        modules = _load_jsonl(path, raw)
    else:
        modules = _load_json(path, raw)

    logger.debug("Loaded %d module records from %s", len(modules), path)
    return modules


__all__ = ["ModuleInputError", "load_modules"]
