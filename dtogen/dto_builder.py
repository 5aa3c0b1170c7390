"""Build DTO class models from component schemas.

A schema named ``...ResponseDTO`` yields one response model. Every other
schema yields a request model and a response model with the same fields,
placed in the request and response packages respectively.
"""

from __future__ import annotations

from .config import GeneratorConfig
from .document import SchemaNode
from .models import DtoField, DtoModel
from .schema_parser import resolve_schema_type

RESPONSE_SUFFIX = "ResponseDTO"


def is_response_schema(schema_name: str) -> bool:
    return schema_name.endswith(RESPONSE_SUFFIX)


def build_dto_model(
    schema_name: str,
    schema: SchemaNode,
    force_response_variant: bool,
    config: GeneratorConfig,
) -> DtoModel:
    """Build one DTO model, keeping the schema's property order."""
    is_response = force_response_variant or is_response_schema(schema_name)
    fields = []
    imports: set[str] = set()

    for prop_name, prop_schema in schema.properties.items():
        resolved = resolve_schema_type(prop_schema)
        imports.update(resolved.required_imports)
        fields.append(DtoField(
            name=prop_name,
            base_name=prop_name,
            description=prop_schema.description,
            resolved_type=resolved,
        ))

    return DtoModel(
        package_name=config.response_dto_package if is_response else config.request_dto_package,
        class_name=schema_name,
        description=schema.description,
        is_response_variant=is_response,
        fields=tuple(fields),
        imports=frozenset(imports),
    )


def build_dto_models(
    schemas: dict[str, SchemaNode],
    config: GeneratorConfig,
) -> list[DtoModel]:
    """Build every DTO model for the document, request variant first."""
    models = []
    for schema_name, schema in schemas.items():
        if is_response_schema(schema_name):
            models.append(build_dto_model(schema_name, schema, True, config))
            continue
        models.append(build_dto_model(schema_name, schema, False, config))
        models.append(build_dto_model(schema_name, schema, True, config))
    return models
