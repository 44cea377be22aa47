"""Parsed module models.

These records are the input contract: an upstream parser reduces every
source file to its resolved imports, exported symbols and declared types.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from utils import normalize_identifier

_RECORD_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
)


class ParsedClass(BaseModel):
    """A class declared in a module."""

    model_config = _RECORD_CONFIG

    name: str = ""
    is_abstract: bool = False
    is_exported: bool = False
    file_path: str = ""


class ParsedNamespace(BaseModel):
    """A namespace declared in a module."""

    model_config = _RECORD_CONFIG

    name: str
    file_path: str = ""


class ParsedModule(BaseModel):
    """A source module reduced to its imports and type counts."""

    model_config = _RECORD_CONFIG

    file_path: str
    imports: list[str] = Field(default_factory=list)
    exports: list[str] = Field(default_factory=list)
    classes: list[ParsedClass] = Field(default_factory=list)
    namespaces: list[ParsedNamespace] = Field(default_factory=list)
    interfaces: int = Field(default=0, ge=0)
    total_types: int = Field(default=0, ge=0)

    @model_validator(mode="before")
    @classmethod
    def _default_total_types(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        if "total_types" in data or "totalTypes" in data:
            return data
        classes = data.get("classes") or []
        interfaces = data.get("interfaces") or 0
        if not isinstance(classes, list) or not isinstance(interfaces, int):
            return data
        return {**data, "total_types": len(classes) + interfaces}

    @field_validator("file_path", mode="after")
    @classmethod
    def _normalize_file_path(cls, v: str) -> str:
        normalized = normalize_identifier(v)
        if not normalized:
            msg = "file_path must be a non-empty identifier"
            raise ValueError(msg)
        return normalized

    @field_validator("imports", mode="after")
    @classmethod
    def _normalize_imports(cls, v: list[str]) -> list[str]:
        return [normalize_identifier(target) for target in v if target]

    @property
    def exported_count(self) -> int:
        return len(self.exports)

    @property
    def abstract_class_count(self) -> int:
        return sum(1 for cls in self.classes if cls.is_abstract)


__all__ = ["ParsedClass", "ParsedModule", "ParsedNamespace"]
