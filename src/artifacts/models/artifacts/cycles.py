from __future__ import annotations

from pydantic import BaseModel, Field


def _artifact_schema_version() -> int:
    from contract.artifacts import ARTIFACT_SCHEMA_VERSION

    return ARTIFACT_SCHEMA_VERSION


class CycleRecord(BaseModel):
    """A dependency cycle with a content-derived identifier.

    ``id`` is stable across runs for the same membership; ``nodes`` starts at
    the lexicographically smallest identifier.
    """

    schema_version: int = Field(default_factory=_artifact_schema_version)
    id: str
    nodes: list[str]
    length: int


__all__ = ["CycleRecord"]
