"""Value objects produced by the builders and handed to the templates.

``model_dump()`` is the only adapter between these records and the
renderer; import sets serialise as sorted lists so output is stable.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, computed_field, field_serializer


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class ResolvedType(_Record):
    type_name: str
    required_imports: frozenset[str] = frozenset()

    @field_serializer("required_imports")
    def _sorted_imports(self, value: frozenset[str]) -> list[str]:
        return sorted(value)


class DtoField(_Record):
    name: str
    base_name: str
    description: str | None = None
    resolved_type: ResolvedType


class DtoModel(_Record):
    package_name: str
    class_name: str
    description: str | None = None
    is_response_variant: bool
    fields: tuple[DtoField, ...] = ()
    imports: frozenset[str] = frozenset()

    @field_serializer("imports")
    def _sorted_imports(self, value: frozenset[str]) -> list[str]:
        return sorted(value)


class PathParam(_Record):
    name: str
    placeholder_token: str


class QueryParam(_Record):
    name: str
    description: str | None = None
    required: bool = False


class OperationDescriptor(_Record):
    operation_id: str | None = None
    summary: str | None = None
    path: str
    http_method: str
    path_constant_name: str
    path_params: tuple[PathParam, ...] = ()
    query_params: tuple[QueryParam, ...] = ()
    has_request_body: bool = False
    request_body_type_name: str | None = None
    is_array_request_body: bool = False
    tag: str

    @computed_field
    @property
    def has_path_params(self) -> bool:
        return bool(self.path_params)

    @computed_field
    @property
    def has_query_params(self) -> bool:
        return bool(self.query_params)


class ServiceModel(_Record):
    class_name: str
    base_name: str
    host: str
    base_path: str
    operations: tuple[OperationDescriptor, ...] = ()


class ConstantEntry(_Record):
    constant_name: str
    value: str
    description: str
