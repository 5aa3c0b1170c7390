"""Typed view of a parsed OpenAPI document.

Only the parts the generator reads are modelled; unknown keys are ignored.
Mappings keep the order they had in the source document.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Methods the generator turns into operations, in processing order
SUPPORTED_METHODS: tuple[str, ...] = ("get", "post", "put", "delete")

# Other OpenAPI methods, reported and skipped
UNSUPPORTED_METHODS: frozenset[str] = frozenset({"patch", "head", "options", "trace"})


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class SchemaNode(_Node):
    """A schema: primitive, array, object, or reference to another schema."""

    type: str | None = None
    format: str | None = None
    reference: str | None = Field(default=None, alias="$ref")
    items: SchemaNode | None = None
    properties: dict[str, SchemaNode] = {}
    description: str | None = None

    @field_validator("type", mode="before")
    @classmethod
    def _first_non_null_type(cls, value: Any) -> Any:
        # OpenAPI 3.1 allows type lists such as ["string", "null"].
        if isinstance(value, list):
            return next((t for t in value if t != "null"), None)
        return value

    @field_validator("items", mode="before")
    @classmethod
    def _single_items(cls, value: Any) -> Any:
        # Tuple-style items lists are not supported; treat as untyped.
        if isinstance(value, list):
            return None
        return value

    @field_validator("properties", mode="before")
    @classmethod
    def _null_properties(cls, value: Any) -> Any:
        return value or {}


class Server(_Node):
    url: str
    description: str | None = None


class Parameter(_Node):
    name: str
    location: str | None = Field(default=None, alias="in")
    description: str | None = None
    required: bool = False

    @field_validator("required", mode="before")
    @classmethod
    def _null_required(cls, value: Any) -> Any:
        return bool(value)


class MediaType(_Node):
    schema_node: SchemaNode | None = Field(default=None, alias="schema")


class RequestBody(_Node):
    description: str | None = None
    content: dict[str, MediaType] = {}


class Operation(_Node):
    operation_id: str | None = Field(default=None, alias="operationId")
    summary: str | None = None
    description: str | None = None
    tags: list[str] = []
    parameters: list[Parameter] = []
    request_body: RequestBody | None = Field(default=None, alias="requestBody")

    @field_validator("tags", "parameters", mode="before")
    @classmethod
    def _null_list(cls, value: Any) -> Any:
        return value or []


class PathItem(BaseModel):
    """Operations declared on one path.

    Keys other than the supported methods are kept as extras so callers can
    report which unsupported methods were skipped.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    get: Operation | None = None
    post: Operation | None = None
    put: Operation | None = None
    delete: Operation | None = None

    def operations(self) -> list[tuple[str, Operation]]:
        """Return (METHOD, operation) pairs in GET, POST, PUT, DELETE order."""
        pairs = []
        for method in SUPPORTED_METHODS:
            operation = getattr(self, method)
            if operation is not None:
                pairs.append((method.upper(), operation))
        return pairs

    def unsupported_methods(self) -> list[str]:
        return [key.upper() for key in (self.model_extra or {}) if key.lower() in UNSUPPORTED_METHODS]


class ApiDocument(_Node):
    """The document tree consumed by every builder."""

    title: str | None = None
    version: str | None = None
    schemas: dict[str, SchemaNode] = {}
    paths: dict[str, PathItem] = {}
    servers: list[Server] = []

    @model_validator(mode="before")
    @classmethod
    def _lift_sections(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "schemas" in data:
            return data
        info = data.get("info") or {}
        components = data.get("components") or {}
        return {
            "title": info.get("title"),
            "version": None if info.get("version") is None else str(info["version"]),
            "schemas": components.get("schemas") or {},
            "paths": data.get("paths") or {},
            "servers": data.get("servers") or [],
        }
